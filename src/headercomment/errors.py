# headercomment:header:start
#
#   project      : HeaderComment
#   file         : errors.py
#   file_relpath : src/headercomment/errors.py
#   license      : MIT
#   copyright    : (c) 2025 HeaderComment contributors
#
# headercomment:header:end

"""Exceptions raised by the HeaderComment core.

Template files that cannot be read are not wrapped: the original `OSError`
propagates unchanged so callers see the real cause.
"""

from __future__ import annotations


class HeaderCommentError(Exception):
    """Base class for all HeaderComment errors."""


class ConfigError(HeaderCommentError):
    """The header options are ambiguous, missing or malformed."""


class TemplateError(HeaderCommentError):
    """The header template could not be rendered.

    The error raised by the template engine is chained as ``__cause__``.
    """

    @property
    def cause(self) -> BaseException | None:
        """Return the underlying template engine error, if any."""
        return self.__cause__
