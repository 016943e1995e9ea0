# ----------------------------------------------------------------------------
# Copyright 2014 Nervana Systems Inc.  All rights reserved.
# ----------------------------------------------------------------------------
"""
Utility functions for building configured objects from YAML files.
"""

import importlib
import logging
import os
import yaml


logger = logging.getLogger(__name__)

# ensure yaml constructors and so forth get registered prior to first load
# attempt.
yaml_initialized = False


def import_class(path):
    """
    Resolve a dotted ``module.Class`` path to the class object it names.

    Arguments:
        path (str): full module and class name.  The leading ``axon.``
                    package prefix may be omitted, so
                    ``transforms.logistic.Logistic`` is also accepted.

    Returns:
        type: the class found.

    Raises:
        ImportError: if neither the path as given nor its ``axon.``
                     prefixed form can be imported.
        AttributeError: if the module does not define the class.
    """
    parts = path.split('.')
    module = '.'.join(parts[:-1])
    try:
        mod = importlib.import_module(module)
    except ImportError:
        # we allow a shortcut syntax that skips axon. from import path, try
        # again with this prepended
        if parts[0] == "axon":
            raise
        module = '.'.join(["axon"] + parts[:-1])
        mod = importlib.import_module(module)
    return getattr(mod, parts[-1])


def obj_multi_constructor(loader, tag_suffix, node):
    """
    Utility function used to actually import and generate a new class instance
    from its name and parameters.

    Arguments:
        loader (yaml.loader.SafeLoader): carries out actual loading
        tag_suffix (str): The latter portion of the tag, representing the full
                          module and class name of the object being
                          instantiated.
        node (yaml.MappingNode): tag/value set specifying the parameters
                                 required for constructing new objects of this
                                 type
    """
    cls = import_class(tag_suffix)
    if isinstance(node, yaml.nodes.MappingNode):
        kwargs = loader.construct_mapping(node, deep=True)
    else:
        kwargs = dict()
    logger.debug("constructing %s with: %s", cls.__name__, str(kwargs))
    return cls(**kwargs)


def initialize_yaml():
    global yaml_initialized
    yaml.add_multi_constructor('!obj:', obj_multi_constructor,
                               Loader=yaml.SafeLoader)
    yaml_initialized = True


def deserialize(load_path, verbose=True):
    """
    Converts a YAML configuration into a python data structure.  Mappings
    tagged ``!obj:<module>.<Class>`` are turned into instances of that class,
    constructed with the mapping items as keyword arguments.

    Arguments:
        load_path (str, File): path and name of the on-disk YAML file to
                               load, or an already opened stream.
        verbose (bool, optional): log the name of the file being loaded.

    Returns:
        object: Converted in-memory python data structure.
    """
    global yaml_initialized
    if not yaml_initialized:
        initialize_yaml()
    if isinstance(load_path, str):
        fname = os.path.expandvars(os.path.expanduser(load_path))
        if verbose:
            logger.info("deserializing object from:  %s", fname)
        with open(fname) as stream:
            return yaml.safe_load(stream)
    if verbose:
        logger.info("deserializing object from:  %s",
                    getattr(load_path, 'name', '<stream>'))
    return yaml.safe_load(load_path)


class YAMLable(yaml.YAMLObject):
    """
    Base class for any objects we'd like to be able to safely parse from yaml
    configuration strems (or dump suitable representation back out to such a
    stream).
    """
    yaml_loader = yaml.SafeLoader
