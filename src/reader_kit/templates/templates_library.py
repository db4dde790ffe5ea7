import logging
from pathlib import Path

import yaml

from .template import CopyTemplate

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).parent / "library"
DEFAULT_VERSION = "1.0"


class TemplatesLibrary:
    def __init__(self, directory: str | Path = DEFAULT_TEMPLATES_DIR) -> None:
        self._templates: dict[tuple[str, str], CopyTemplate] = {}
        logger.info("Initializing TemplatesLibrary from directory: %s", directory)
        self._load_all(Path(directory))
        logger.info("Loaded %d templates", len(self._templates))

    def get(self, name: str, version: str = DEFAULT_VERSION) -> CopyTemplate:
        logger.debug("Getting template: name=%s, version=%s", name, version)
        try:
            return self._templates[(name, version)]
        except KeyError:
            logger.error("Template not found: name=%s, version=%s", name, version)
            raise KeyError(f"Template '{name}' version '{version}' not found")

    def list(self) -> list[tuple[str, str]]:
        return sorted(self._templates.keys())

    def _load_all(self, directory: Path) -> None:
        for file_path in sorted(directory.glob("*.yaml")):
            template = self._load_template(file_path)
            self._templates[(template.name, template.version)] = template
            logger.debug(
                "Loaded template: %s v%s from %s",
                template.name,
                template.version,
                file_path,
            )

    def _load_template(self, file_path: Path) -> CopyTemplate:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
        template = CopyTemplate(**data)
        if template.placeholders() != set(template.inputs):
            logger.error("Template %s declares inputs that do not match its body", file_path)
            raise ValueError(
                f"Template '{template.name}' inputs {sorted(template.inputs)} "
                f"do not match placeholders {sorted(template.placeholders())}"
            )
        return template
