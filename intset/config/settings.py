from __future__ import annotations
import logging
from collections.abc import Mapping
from pathlib import Path

import param
from dynaconf.utils.boxing import DynaBox

from intset.base.exceptions import IntSetConfigError
from intset.base.intset import IntSet
from intset.config.defaultconfigloader import DefaultConfigLoader

logger = logging.getLogger(__name__.rsplit('.')[-1])


class IntSetSettings(param.Parameterized):
    """IntSet settings, read from the ``intset`` section of the configuration"""
    max_size = param.Integer(default=IntSet.MAX_SIZE, bounds=(1, None),
                             doc="Maximum number of distinct values in a set")

    @classmethod
    def from_config(cls, config: Mapping | None) -> IntSetSettings:
        """Creates settings from the config, missing values take defaults

        Raises:
            IntSetConfigError: if values in the ``intset`` section are not valid
        """
        section = DynaBox(config or {}).get('intset') or {}
        if not isinstance(section, Mapping):
            raise IntSetConfigError(f"'intset' config section must be a mapping, got {section!r}")
        params = {}
        max_size = section.get('max_size')
        if max_size is not None:
            params['max_size'] = max_size
        try:
            return cls(**params)
        except ValueError as e:
            raise IntSetConfigError(f"Invalid intset config: {e}") from e

    def intset_class(self) -> type[IntSet]:
        return IntSet.bounded(self.max_size)


def load_intset_class(filename: str | Path | None = None) -> type[IntSet]:
    """Returns IntSet class with capacity configured in the file, default class if no file"""
    if filename is None:
        return IntSet
    config = DefaultConfigLoader().load_config_from_file(filename)
    settings = IntSetSettings.from_config(config)
    logger.info(f'IntSet capacity from {filename}: {settings.max_size}')
    return settings.intset_class()
