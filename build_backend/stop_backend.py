"""Build backend: setuptools plus the ``colored`` option.

    pip install . -C colored=enabled
"""

from setuptools import build_meta as _setuptools
from setuptools.build_meta import *  # noqa: F401,F403

from stop_build_config import split_settings, write_build_module


def _configure(config_settings):
    colored, settings = split_settings(config_settings)
    write_build_module(colored)
    return settings


def _strip(config_settings):
    return split_settings(config_settings)[1]


def build_wheel(wheel_directory, config_settings=None, metadata_directory=None):
    return _setuptools.build_wheel(wheel_directory, _configure(config_settings), metadata_directory)


def build_editable(wheel_directory, config_settings=None, metadata_directory=None):
    return _setuptools.build_editable(wheel_directory, _configure(config_settings), metadata_directory)


def build_sdist(sdist_directory, config_settings=None):
    return _setuptools.build_sdist(sdist_directory, _strip(config_settings))


def get_requires_for_build_wheel(config_settings=None):
    return _setuptools.get_requires_for_build_wheel(_strip(config_settings))


def get_requires_for_build_editable(config_settings=None):
    return _setuptools.get_requires_for_build_editable(_strip(config_settings))


def get_requires_for_build_sdist(config_settings=None):
    return _setuptools.get_requires_for_build_sdist(_strip(config_settings))


def prepare_metadata_for_build_wheel(metadata_directory, config_settings=None):
    return _setuptools.prepare_metadata_for_build_wheel(metadata_directory, _strip(config_settings))


def prepare_metadata_for_build_editable(metadata_directory, config_settings=None):
    return _setuptools.prepare_metadata_for_build_editable(metadata_directory, _strip(config_settings))
