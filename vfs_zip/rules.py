"""
Fixed names and tables for the ZIP file options.

This file exists to keep option identities and charset naming in one place.
"""

import re

CHARSET_OPTION_NAME = "zip:charset"
OPTION_ENTRY_POINT_GROUP = "vfs_zip.file_options"

# Options bag keys are prefix + param name, e.g. "<prefix>.charset"
ZIP_CONFIG_PREFIX = "vfs_zip.fsoptions.ZipFileSystemConfigBuilder"
ZIP_CONFIG_SCOPE = "zip"

CONVERTIBLE_MESSAGE = "FileOption value of [{name}] must be convertible to {kind}."

# First char alphanumeric, then alphanumerics and - + : _ .
LEGAL_CHARSET_NAME = re.compile(r"^[A-Za-z0-9][A-Za-z0-9\-+:_.]*$")

# Python codec name (codecs.lookup(...).name) -> preferred IANA spelling
CANONICAL_CHARSET_NAMES = {
    "utf-8": "UTF-8",
    "ascii": "US-ASCII",
    "iso8859-1": "ISO-8859-1",
    "iso8859-2": "ISO-8859-2",
    "iso8859-3": "ISO-8859-3",
    "iso8859-4": "ISO-8859-4",
    "iso8859-5": "ISO-8859-5",
    "iso8859-6": "ISO-8859-6",
    "iso8859-7": "ISO-8859-7",
    "iso8859-8": "ISO-8859-8",
    "iso8859-9": "ISO-8859-9",
    "iso8859-13": "ISO-8859-13",
    "iso8859-15": "ISO-8859-15",
    "utf-16": "UTF-16",
    "utf-16-be": "UTF-16BE",
    "utf-16-le": "UTF-16LE",
    "utf-32": "UTF-32",
    "utf-32-be": "UTF-32BE",
    "utf-32-le": "UTF-32LE",
    "cp437": "IBM437",
    "cp850": "IBM850",
    "cp866": "IBM866",
    "cp1250": "windows-1250",
    "cp1251": "windows-1251",
    "cp1252": "windows-1252",
    "cp1253": "windows-1253",
    "cp1254": "windows-1254",
    "cp1255": "windows-1255",
    "cp1256": "windows-1256",
    "cp1257": "windows-1257",
    "cp1258": "windows-1258",
    "cp932": "windows-31j",
    "shift_jis": "Shift_JIS",
    "euc_jp": "EUC-JP",
    "iso2022_jp": "ISO-2022-JP",
    "euc_kr": "EUC-KR",
    "gb2312": "GB2312",
    "gbk": "GBK",
    "gb18030": "GB18030",
    "big5": "Big5",
    "big5hkscs": "Big5-HKSCS",
    "koi8-r": "KOI8-R",
    "koi8-u": "KOI8-U",
}
