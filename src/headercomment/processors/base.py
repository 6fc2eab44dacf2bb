# headercomment:header:start
#
#   project      : HeaderComment
#   file         : base.py
#   file_relpath : src/headercomment/processors/base.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Base class for comment processors.

A comment processor turns rendered header text into a comment block for one
family of languages. The block is made of an opening line (``block_prefix``),
one line per text line (``line_prefix`` followed by a space and the text, or
``line_prefix`` alone for a blank line) and a closing line (``block_suffix``).
Every line, the closing one included, ends with ``"\\n"``.

Example for ``block_prefix="/**"``, ``line_prefix=" *"``, ``block_suffix=" */"``::

    /**
     * Hello World
     */
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from headercomment.config.logging import HeaderCommentLogger, get_logger

if TYPE_CHECKING:
    from headercomment.filetypes.base import FileType

logger: HeaderCommentLogger = get_logger(__name__)


class CommentProcessor:
    """Wrap header text in the comment syntax of a file type.

    Attributes:
        block_prefix (str): Line opening the comment block.
        line_prefix (str): Prefix of every inner line.
        block_suffix (str): Line closing the comment block.
        file_type (FileType | None): The file type this instance is registered for;
            ``None`` for the fallback processor.
    """

    block_prefix: str = ""
    line_prefix: str = ""
    block_suffix: str = ""

    def __init__(
        self,
        *,
        block_prefix: str | None = None,
        line_prefix: str | None = None,
        block_suffix: str | None = None,
    ) -> None:
        # Fall back to class attributes so subclasses may configure either way
        if block_prefix is not None:
            self.block_prefix = block_prefix
        if line_prefix is not None:
            self.line_prefix = line_prefix
        if block_suffix is not None:
            self.block_suffix = block_suffix
        self.file_type: FileType | None = None

    def render_line(self, line: str) -> str:
        """Render one inner line of the comment block.

        Args:
            line (str): A line of header text (without terminator).

        Returns:
            str: ``line_prefix`` alone for a blank line, otherwise
                ``line_prefix + " " + line``.
        """
        if not line.strip():
            return self.line_prefix
        return f"{self.line_prefix} {line}"

    def format(self, text: str) -> str:
        """Wrap ``text`` in a comment block.

        Args:
            text (str): Rendered header text; lines are split on any line terminator.

        Returns:
            str: The comment block; every line ends with ``"\\n"``, the closing one included.
        """
        lines: list[str] = [self.block_prefix]
        lines.extend(self.render_line(line) for line in text.splitlines())
        lines.append(self.block_suffix)
        block: str = "\n".join(lines) + "\n"
        logger.trace("%s formatted %d line(s)", self.__class__.__name__, len(lines))
        return block

    def __repr__(self) -> str:
        name: str = self.file_type.name if self.file_type else "<fallback>"
        return f"{self.__class__.__name__}(file_type={name!r})"
