# headercomment:header:start
#
#   project      : HeaderComment
#   file         : model.py
#   file_relpath : src/headercomment/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Header options model.

Header options are immutable once built. They name exactly one template
source (a literal template string or a template file) and the separator placed
between the header and the original file content.

Options can be built from:
- a plain string (the literal template),
- a mapping with the keys ``file``, ``template``, ``encoding`` and ``separator``
  (as found in the ``[tool.headercomment]`` table of a TOML file),
- an existing `HeaderOptions` instance (returned as-is).
"""

from __future__ import annotations

import codecs
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Final

from headercomment.config.logging import HeaderCommentLogger, get_logger
from headercomment.constants import DEFAULT_SEPARATOR, DEFAULT_TEMPLATE_ENCODING
from headercomment.errors import ConfigError

logger: HeaderCommentLogger = get_logger(__name__)

KNOWN_OPTION_KEYS: Final[frozenset[str]] = frozenset({"file", "template", "encoding", "separator"})


def _validate_encoding(encoding: str) -> str:
    try:
        codecs.lookup(encoding)
    except LookupError as exc:
        raise ConfigError(f"Unknown template encoding: {encoding!r}") from exc
    return encoding


@dataclass(frozen=True)
class TemplateSource:
    """Where the header template comes from.

    Attributes:
        text (str | None): Literal template text.
        file (Path | None): Path of a template file, read on every resolve.
        encoding (str): Text encoding used to read ``file``.

    Raises:
        ConfigError: If neither or both of ``text`` and ``file`` are set.
    """

    text: str | None = None
    file: Path | None = None
    encoding: str = DEFAULT_TEMPLATE_ENCODING

    def __post_init__(self) -> None:
        if self.text is None and self.file is None:
            raise ConfigError("No header template given: expected a template string or a file")
        if self.text is not None and self.file is not None:
            raise ConfigError(
                "Ambiguous header template: give a template string or a file, not both"
            )
        _validate_encoding(self.encoding)

    @property
    def is_literal(self) -> bool:
        """Return True when the template is given inline."""
        return self.text is not None

    def describe(self) -> str:
        """Return a short human-readable description for logs and CLI output."""
        if self.file is not None:
            return f"file {self.file} ({self.encoding})"
        return "inline template"


@dataclass(frozen=True)
class HeaderOptions:
    """Immutable header options shared by every file of a transform.

    Attributes:
        source (TemplateSource): The active template source.
        separator (str): Text placed between the header and the original content.
    """

    source: TemplateSource
    separator: str = DEFAULT_SEPARATOR

    @classmethod
    def from_options(
        cls,
        options: str | Mapping[str, Any] | HeaderOptions,
        *,
        base_dir: Path | None = None,
    ) -> HeaderOptions:
        """Build options from a template string, a mapping or existing options.

        Args:
            options (str | Mapping[str, Any] | HeaderOptions): The user supplied options.
            base_dir (Path | None): Directory against which a relative ``file`` is
                resolved (e.g. the directory of the TOML file declaring it).

        Returns:
            HeaderOptions: The validated options.

        Raises:
            ConfigError: If the options are missing, ambiguous or malformed.
        """
        if isinstance(options, HeaderOptions):
            return options
        if isinstance(options, str):
            return cls(source=TemplateSource(text=options))
        if not isinstance(options, Mapping):
            raise ConfigError(
                f"Header options must be a string or a mapping, not {type(options).__name__}"
            )
        return cls._from_mapping(options, base_dir=base_dir)

    @classmethod
    def _from_mapping(cls, data: Mapping[str, Any], *, base_dir: Path | None) -> HeaderOptions:
        unknown: list[str] = sorted(str(k) for k in data if k not in KNOWN_OPTION_KEYS)
        if unknown:
            logger.warning("Ignoring unknown header option(s): %s", ", ".join(unknown))

        file_value: Any = data.get("file")
        text_value: Any = data.get("template")
        encoding: Any = data.get("encoding", DEFAULT_TEMPLATE_ENCODING)
        separator: Any = data.get("separator", DEFAULT_SEPARATOR)

        for key, value in (("file", file_value), ("template", text_value)):
            if value is not None and not isinstance(value, (str, Path)):
                raise ConfigError(f"Option '{key}' must be a string, not {type(value).__name__}")
        for key, value in (("encoding", encoding), ("separator", separator)):
            if not isinstance(value, str):
                raise ConfigError(f"Option '{key}' must be a string, not {type(value).__name__}")

        file_path: Path | None = None
        if file_value is not None:
            if str(file_value) == "":
                raise ConfigError("Option 'file' must not be empty")
            file_path = Path(file_value)
            if base_dir is not None and not file_path.is_absolute():
                file_path = base_dir / file_path

        source = TemplateSource(
            text=str(text_value) if text_value is not None else None,
            file=file_path,
            encoding=encoding,
        )
        logger.debug("Header options: source=%s separator=%r", source.describe(), separator)
        return cls(source=source, separator=separator)
