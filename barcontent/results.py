from dataclasses import dataclass
from typing import ClassVar
from urllib.parse import SplitResult, urlsplit

from logbook import Logger

from .consts import ResultType
from .messages import FieldRecord, parse_fields


log = Logger(__name__)


@dataclass(frozen=True)
class WifiResult:
    type: ClassVar[ResultType] = ResultType.WIFI
    record: FieldRecord


@dataclass(frozen=True)
class UrlResult:
    type: ClassVar[ResultType] = ResultType.URL
    url: SplitResult


@dataclass(frozen=True)
class TextResult:
    type: ClassVar[ResultType] = ResultType.TEXT
    text: str


ParsedResult = WifiResult | UrlResult | TextResult


def parse_url(string: str) -> SplitResult | None:
    try:
        url = urlsplit(string)
    except ValueError:
        return None
    if url.scheme and url.netloc:
        return url
    return None


def parse_result(raw_data: str, symbology: str | None = None) -> ParsedResult:
    """
    Find out what the decoded text of a barcode is about.

    The interpretations are tried in order: WiFi configuration, URL, then plain text,
    which always matches.

    :param raw_data: Text decoded from the barcode.
    :param symbology: Name of the barcode type which the text came from, if known.
        It is only used for logging.
    """
    log.info('Barcode type: {}', symbology or 'unknown')
    if (record := parse_fields(raw_data)) is not None:
        log.info('Parsed wifi message for network: {}', record.ssid)
        return WifiResult(record)
    if url := parse_url(raw_data):
        log.info('Parsed URL: {}', url)
        return UrlResult(url)
    log.info('Unknown content. Take as raw text.')
    return TextResult(raw_data)
