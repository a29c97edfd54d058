# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/13 20:01:52
# @Author : Contributors

"""INI files from arbitrary legacy tools.

There's no real standard for these, so the parser is tolerant rather than
strict: whatever line it can't classify gets skipped, and duplicated keys
simply overwrite (with a warning logged) instead of raising like
the standard lib `configparser` does.

Comments could also be kept, as numbered keys like `Comment1`, `Comment2`,
so that they survive a read-write round trip in place.
"""

import logging
from collections.abc import Iterable
from io import StringIO, TextIOBase
from re import compile as regex
from re import escape

import chardet

from ..abstract import FileHandler
from .consts import (
    DEFAULT_COMMENT_CHARS,
    DEFAULT_COMMENT_KEY_PREFIX,
    DEFAULT_NULL_SECTION,
    IniStatus,
)
from .model import IniDocument, IniSection

_SECTION = regex(r'^\s*\[(.+)\]\s*$')
_KEY_VALUE = regex(r'''^\s*(.+?)\s*=\s*(['"]?)(.*)\2\s*$''')


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str, encoding: str | None = None, *,
        comment_chars: str = DEFAULT_COMMENT_CHARS,
        ignore_comments: bool = True,
        comments_must_be_own_line: bool = False,
        null_section: str = DEFAULT_NULL_SECTION,
        allow_key_without_value: bool = False,
        comment_key_prefix: str | None = DEFAULT_COMMENT_KEY_PREFIX
    ) -> None:
        """
        Args:
            comment_chars: each char of it starts a comment.
            ignore_comments: if not, keep comments as `{prefix}{N}` keys,
                where N counts from 1 in each section.
            comments_must_be_own_line: if not, `key = val ; comment`
                gets its trailing comment cut off. Use `\\;` for a literal.
            null_section: where the pairs before any `[Section]` go.
            allow_key_without_value: keep lines without `=` as `None` keys.
            comment_key_prefix: required if comments are kept.
        """
        super().__init__(filename, encoding)
        if not comment_chars:
            raise ValueError('At least one comment char is required.')
        if not ignore_comments and not comment_key_prefix:
            raise ValueError(
                'Comment key prefix is required to keep comments.')
        self._comment_chars = comment_chars
        self._ignore_comments = ignore_comments
        self._own_line_comments = comments_must_be_own_line
        self._null_section = null_section
        self._bare_keys = allow_key_without_value
        self._comment_prefix = comment_key_prefix or ''

        marks = escape(comment_chars)
        self._trailing_comment = regex(rf'(?<!\\)[{marks}]')
        self._escaped_mark = regex(rf'\\([{marks}])')
        self._comment_key = regex(rf'{escape(self._comment_prefix)}[0-9]+')

    @property
    def null_section(self) -> str:
        return self._null_section

    def _split_comment(self, line: str) -> tuple[str, str | None]:
        if (m := self._trailing_comment.search(line)) is None:
            return self._escaped_mark.sub(r'\1', line), None
        return (self._escaped_mark.sub(r'\1', line[:m.start()]).rstrip(),
                line[m.end():])

    def readlines(self, lines: Iterable[str]) -> IniDocument:
        """Parse lines of INI text, in one pass."""
        ret = IniDocument(self._null_section)
        this_sect: IniSection | None = None
        comments = 0

        def current() -> IniSection:
            nonlocal this_sect
            if this_sect is None:
                this_sect = ret.setdefault(self._null_section)
            return this_sect

        def keep_comment(text: str) -> None:
            nonlocal comments
            comments += 1
            current()[f'{self._comment_prefix}{comments}'] = text

        for lineno, i in enumerate(lines):
            if lineno == 0:
                # Notepad-style utf-8 BOM, `\s` won't match it.
                i = i.removeprefix('\ufeff')
            i = i.rstrip()
            if (m := _SECTION.match(i)):
                this_sect = ret.setdefault(m.group(1))
                comments = 0
                continue
            if not (stripped := i.lstrip()):
                continue
            if stripped[0] in self._comment_chars:
                if not self._ignore_comments:
                    keep_comment(stripped[1:])
                continue

            comment = None
            if not self._own_line_comments:
                i, comment = self._split_comment(i)
            if (m := _SECTION.match(i)):  # like `[Section] ; comment`
                this_sect = ret.setdefault(m.group(1))
                comments = 0
            elif (m := _KEY_VALUE.match(i)):
                current()[m.group(1)] = m.group(3)
            elif self._bare_keys and i.strip():
                current()[i.strip()] = None
            if comment is not None and not self._ignore_comments:
                keep_comment(comment)
        return ret

    def readstream(self, buf: TextIOBase) -> IniDocument:
        """读取解码好的字符串流。

        如没有特殊需求，直接调用`self.read()`便是。
        """
        return self.readlines(buf)

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec is None or codec['encoding'] is None \
                or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8'}

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('gbk', errors='replace')
        return StringIO(buf)

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        CAUTION:
            May raise `OSError`. Try `convert_ini_to_dict()` for a status code.
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp)
        except UnicodeDecodeError:
            logging.debug(f'{self._fn} is not {self._codec}, guessing codec.')
            return self.readstream(self._decode_file(self._fn))

    def __output_pair(self, key: str, val: str | None, delimiter: str) -> str:
        if not self._ignore_comments and self._comment_key.fullmatch(key):
            return f'{self._comment_chars[0]}{val}\n'
        if val is None:
            return f'{key}\n'
        if not self._own_line_comments:
            val = self._trailing_comment.sub(lambda m: '\\' + m.group(), val)
        if val != val.strip():
            val = f'"{val}"'
        return f'{key}{delimiter}{val}\n'

    def write(
        self, instance: IniDocument, *,
        blank_lines: int = 1,
        delimiter: str = '='
    ) -> None:
        """保存到 INI 文件。

        Pairs of the null section come first, without a declaration.
        Kept comments are restored as comment lines.
        """
        sections = list(instance.keys())
        if instance.header is not None:
            sections.remove(instance.header.name)
            sections.insert(0, instance.header.name)
        with open(self._fn, 'w', encoding=self._codec) as fp:
            for name in sections:
                section = instance[name]
                if section is not instance.header:
                    fp.write(f'[{name}]\n')
                for k, v in section.items():
                    fp.write(self.__output_pair(k, v, delimiter))
                fp.write('\n' * blank_lines)

    def __str__(self) -> str:
        return f'INI file: {super().__str__()}'


def parse_ini_text(text: str, **options) -> IniDocument:
    """Parse INI text already in memory. See `IniParser` for options."""
    return IniParser('<string>', **options).readstream(StringIO(text))


def convert_ini_to_dict(
    filename: str, encoding: str | None = None, **options
) -> tuple[IniDocument, IniStatus]:
    """Read an INI file, reporting failure as a status code.

    Hint:
        If the file is NOT FOUND, or NOT READABLE, a warning is logged
        and an empty document returned along with the status.
    """
    parser = IniParser(filename, encoding, **options)
    try:
        return parser.read(), IniStatus.OK
    except FileNotFoundError as e:
        logging.warning(f'INI file not found: {e}')
        return IniDocument(parser.null_section), IniStatus.FILE_NOT_FOUND
    except OSError as e:
        logging.warning(f'INI file not readable: {e}')
        return IniDocument(parser.null_section), IniStatus.UNREADABLE
