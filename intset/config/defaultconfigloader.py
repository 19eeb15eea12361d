import logging
from pathlib import Path

from dynaconf import Dynaconf
from dynaconf.utils.boxing import DynaBox

from intset.base.exceptions import IntSetConfigError

_log = logging.getLogger('config')


class DefaultConfigLoader:
    """Loads configuration from YAML or TOML files."""

    def check_file(self, filename: str | Path) -> Path:
        filename = Path(filename)
        match filename.suffix:
            case '.yaml' | '.yml' | '.toml' | '.tml':
                pass
            case _:
                raise ValueError(f"Unsupported file format: {filename.suffix}")
        if not filename.is_file():
            raise IntSetConfigError(f"Config file {filename} not found")
        return filename

    def load_config_from_file(self, filename: str | Path) -> DynaBox:
        """Creates a Dynaconf instance and loads configuration from a given file."""
        return self.load_config_from_files(filename)

    def load_config_from_files(self, *filenames: str | Path) -> DynaBox:
        """Loads configuration layered from given files, later files override earlier ones.

        Nested sections are merged, not replaced. Environment variables prefixed with
        ``INTSET_`` override values from files (e.g. ``INTSET_INTSET__MAX_SIZE=20``).
        """
        files = [str(self.check_file(f)) for f in filenames]
        _log.info("Loading config from %s", ', '.join(files))
        try:
            settings = Dynaconf(settings_files=files, merge_enabled=True, envvar_prefix='INTSET')
            config = settings.as_dict()
        except Exception as e:
            _log.error(f"Failed to load config from {', '.join(files)}, {e}")
            raise IntSetConfigError(f"Cannot load config: {e}") from e
        return DynaBox(config)
