from enum import StrEnum


SHORT_NAME = 'barcontent'

ENV_VERBOSE = 'BARCONTENT_VERBOSE'

WIFI_PREFIX = 'WIFI:'
# Some encoders put a byte-order mark in front of the text.
BOM = '\ufeff'

ESCAPE_CHAR = '\\'
FIELD_SEPARATOR = ';'
KEY_SEPARATOR = ':'


class ResultType(StrEnum):
    WIFI = 'wifi'
    URL = 'url'
    TEXT = 'text'


class WifiAuthType(StrEnum):
    WEP = 'WEP'
    WPA = 'WPA'
    WPA2 = 'WPA2'
    WPA2_EAP = 'WPA2-EAP'
    NOPASS = 'nopass'


class WifiField(StrEnum):
    SSID = 'S'
    PASSWORD = 'P'
    ENCRYPTION = 'T'
    HIDDEN = 'H'
    PHASE2_METHOD = 'PH2'
    IDENTITY = 'I'
    ANONYMOUS_IDENTITY = 'A'
    EAP_METHOD = 'E'
