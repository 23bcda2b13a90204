import re
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import IntEnum
from types import MappingProxyType
from typing import Self

from logbook import Logger

from .consts import (
    BOM, ESCAPE_CHAR, FIELD_SEPARATOR, KEY_SEPARATOR, WIFI_PREFIX, WifiAuthType, WifiField,
)


log = Logger(__name__)

ESCAPED_CHAR_RE = re.compile(r'\\([\\;:"])')
SPECIAL_CHAR_RE = re.compile(r'([\\;:"])')


class ScanState(IntEnum):
    READING_KEY = 0
    READING_VALUE = 1
    READING_ESCAPE = 2


def parse_to_boolean(value: str) -> bool:
    return value.lower() == 'true'


# Ref: https://en.wikipedia.org/wiki/QR_code#Joining_a_Wi%E2%80%91Fi_network
def unescape(string: str) -> str:
    # A backslash in front of any other character is kept as is.
    return ESCAPED_CHAR_RE.sub(r'\1', string)


def escape(string: str) -> str:
    return SPECIAL_CHAR_RE.sub(r'\\\1', string)


def split_fields(body: str) -> Iterator[tuple[str, str]]:
    """
    Split the body of a WiFi message into ``(key, value)`` pairs.

    Delimiters are only recognized when they are not escaped. The returned key and
    value still contain their escape sequences, so that each of them can be unescaped
    on its own. The final ``;`` may be missing.
    """
    state = resume_state = ScanState.READING_KEY
    start = 0
    key = ''
    for i, c in enumerate(body):
        if state == ScanState.READING_ESCAPE:
            # Exactly one character is consumed by an escape.
            state = resume_state
            continue
        if c == ESCAPE_CHAR:
            resume_state, state = state, ScanState.READING_ESCAPE
            continue
        if state == ScanState.READING_KEY:
            if c == KEY_SEPARATOR:
                key = body[start:i]
                start = i + 1
                state = ScanState.READING_VALUE
            elif c == FIELD_SEPARATOR:
                if i > start:
                    log.debug('Drop segment without key separator: {}', body[start:i])
                start = i + 1
        elif c == FIELD_SEPARATOR:
            yield key, body[start:i]
            start = i + 1
            state = ScanState.READING_KEY
    if state == ScanState.READING_ESCAPE:
        state = resume_state
    if state == ScanState.READING_VALUE:
        yield key, body[start:]
    elif start < len(body):
        log.debug('Drop segment without key separator: {}', body[start:])


@dataclass(frozen=True)
class FieldRecord:
    """
    Fields of a WiFi message, keyed by their (unescaped) keys.

    Unknown keys are kept, so they can be looked up with ``record['X']`` or
    ``record.get('X')``. A key which doesn't appear in the message gives ``None``,
    while a key with nothing after its ``:`` gives an empty string.
    """
    fields: Mapping[str, str] = field(default_factory=dict)
    recognized: bool = True

    def __post_init__(self):
        object.__setattr__(self, 'fields', MappingProxyType(dict(self.fields)))

    def __hash__(self):
        return hash((frozenset(self.fields.items()), self.recognized))

    def __getitem__(self, key: str) -> str:
        return self.fields[key]

    def __contains__(self, key: object) -> bool:
        return key in self.fields

    def get(self, key: str, default: str | None = None) -> str | None:
        return self.fields.get(key, default)

    def _get_non_empty(self, key: str) -> str | None:
        return self.fields.get(key) or None

    @property
    def ssid(self) -> str | None:
        return self.fields.get(WifiField.SSID)

    @property
    def password(self) -> str | None:
        # "P:;" is what encoders write for open networks, so it means "no password" here.
        # Use get('P') to tell it apart from a missing P field.
        return self._get_non_empty(WifiField.PASSWORD)

    @property
    def encryption(self) -> str:
        # Value: WEP, WPA, WPA2-EAP, nopass, or anything the encoder put there.
        return self.fields.get(WifiField.ENCRYPTION) or WifiAuthType.NOPASS.value

    @property
    def phase2_method(self) -> str | None:
        method = self._get_non_empty(WifiField.PHASE2_METHOD)
        if method:
            return method
        # Old encoders put the phase 2 method in the H field.
        h_value = self._get_non_empty(WifiField.HIDDEN)
        if h_value and h_value.lower() not in ('true', 'false'):
            return h_value
        return None

    @property
    def hidden(self) -> bool:
        h_value = self._get_non_empty(WifiField.HIDDEN)
        return bool(h_value) and parse_to_boolean(h_value)

    @property
    def identity(self) -> str | None:
        return self._get_non_empty(WifiField.IDENTITY)

    @property
    def anonymous_identity(self) -> str | None:
        return self._get_non_empty(WifiField.ANONYMOUS_IDENTITY)

    @property
    def eap_method(self) -> str | None:
        return self._get_non_empty(WifiField.EAP_METHOD)


# Ref: https://github.com/zxing/zxing/wiki/Barcode-Contents#wifi-network-config-android
def parse_fields(string: str) -> FieldRecord | None:
    # Example: WIFI:S:Wikipedia;T:WPA;P:Password1!;;
    string = string.removeprefix(BOM)
    if not string.startswith(WIFI_PREFIX):
        log.debug('Not starts with {}', WIFI_PREFIX)
        return None
    fields = {}
    # Later occurrence of the same key wins.
    for key, value in split_fields(string[len(WIFI_PREFIX):]):
        fields[unescape(key)] = unescape(value)
    return FieldRecord(fields)


@dataclass
class WifiInfoMessage:
    ssid: str = ''
    password: str | None = None
    auth_type: str = WifiAuthType.WPA
    hidden: bool = False

    def __post_init__(self):
        # An empty password is not written to the QR code, so it is the same as no password.
        if not self.password:
            self.password = None

    @classmethod
    def from_record(cls, record: FieldRecord) -> Self:
        return cls(
            ssid=record.ssid or '',
            password=record.password,
            auth_type=record.encryption,
            hidden=record.hidden,
        )


def serialize_wifi_message(wifi_info: WifiInfoMessage) -> str:
    auth_type = wifi_info.auth_type or WifiAuthType.NOPASS
    parts = [f'S:{escape(wifi_info.ssid)}', f'T:{escape(auth_type)}']
    if auth_type != WifiAuthType.NOPASS and wifi_info.password:
        parts.append(f'P:{escape(wifi_info.password)}')
    if wifi_info.hidden:
        parts.append('H:true')
    return WIFI_PREFIX + FIELD_SEPARATOR.join(parts) + ';;'
