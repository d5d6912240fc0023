"""Readable names for GATT status codes, disconnect reasons and stack events."""

from __future__ import annotations

import logging
from enum import IntEnum

__all__ = [
    "GattStatus",
    "ConnReason",
    "GattcEvent",
    "GattsEvent",
    "GapEvent",
    "SearchEvent",
    "gatt_status_to_string",
    "gatt_close_reason_to_string",
    "gatt_client_event_type_to_string",
    "gatt_server_event_type_to_string",
    "gap_event_to_string",
    "search_event_type_to_string",
]

_log = logging.getLogger(__name__)


class GattStatus(IntEnum):
    """GATT operation status codes."""

    OK = 0x00
    INVALID_HANDLE = 0x01
    READ_NOT_PERMIT = 0x02
    WRITE_NOT_PERMIT = 0x03
    INVALID_PDU = 0x04
    INSUF_AUTHENTICATION = 0x05
    REQ_NOT_SUPPORTED = 0x06
    INVALID_OFFSET = 0x07
    INSUF_AUTHORIZATION = 0x08
    PREPARE_Q_FULL = 0x09
    NOT_FOUND = 0x0A
    NOT_LONG = 0x0B
    INSUF_KEY_SIZE = 0x0C
    INVALID_ATTR_LEN = 0x0D
    ERR_UNLIKELY = 0x0E
    INSUF_ENCRYPTION = 0x0F
    UNSUPPORT_GRP_TYPE = 0x10
    INSUF_RESOURCE = 0x11
    NO_RESOURCES = 0x80
    INTERNAL_ERROR = 0x81
    WRONG_STATE = 0x82
    DB_FULL = 0x83
    BUSY = 0x84
    ERROR = 0x85
    CMD_STARTED = 0x86
    ILLEGAL_PARAMETER = 0x87
    PENDING = 0x88
    AUTH_FAIL = 0x89
    MORE = 0x8A
    INVALID_CFG = 0x8B
    SERVICE_STARTED = 0x8C
    ENCRYPED_NO_MITM = 0x8D
    NOT_ENCRYPTED = 0x8E
    CONGESTED = 0x8F
    DUP_REG = 0x90
    ALREADY_OPEN = 0x91
    CANCEL = 0x92
    STACK_RSP = 0xE0
    APP_RSP = 0xE1
    UNKNOWN_ERROR = 0xEF
    CCC_CFG_ERR = 0xFD
    PRC_IN_PROGRESS = 0xFE
    OUT_OF_RANGE = 0xFF


class ConnReason(IntEnum):
    """Reasons a GATT connection was closed."""

    UNKNOWN = 0x0000
    L2C_FAILURE = 0x0001
    TIMEOUT = 0x0008
    TERMINATE_PEER_USER = 0x0013
    TERMINATE_LOCAL_HOST = 0x0016
    FAIL_ESTABLISH = 0x003E
    LMP_TIMEOUT = 0x0022
    CONN_CANCEL = 0x0100
    NONE = 0x0101


class GattcEvent(IntEnum):
    """GATT client callback events that have a name."""

    REG = 0
    UNREG = 1
    OPEN = 2
    READ_CHAR = 3
    WRITE_CHAR = 4
    CLOSE = 5
    SEARCH_CMPL = 6
    SEARCH_RES = 7
    READ_DESCR = 8
    WRITE_DESCR = 9
    NOTIFY = 10
    PREP_WRITE = 11
    EXEC = 12
    ACL = 13
    CANCEL_OPEN = 14
    SRVC_CHG = 15
    ENC_CMPL_CB = 17
    CFG_MTU = 18
    ADV_DATA = 19
    MULT_ADV_ENB = 20
    MULT_ADV_UPD = 21
    MULT_ADV_DATA = 22
    MULT_ADV_DIS = 23
    CONGEST = 24
    BTH_SCAN_ENB = 25
    BTH_SCAN_CFG = 26
    BTH_SCAN_RD = 27
    BTH_SCAN_THR = 28
    BTH_SCAN_PARAM = 29
    BTH_SCAN_DIS = 30
    SCAN_FLT_CFG = 31
    SCAN_FLT_PARAM = 32
    SCAN_FLT_STATUS = 33
    ADV_VSC = 34
    REG_FOR_NOTIFY = 38
    UNREG_FOR_NOTIFY = 39
    CONNECT = 40
    DISCONNECT = 41


class GattsEvent(IntEnum):
    """GATT server callback events that have a name."""

    REG = 0
    READ = 1
    WRITE = 2
    EXEC_WRITE = 3
    MTU = 4
    CONF = 5
    UNREG = 6
    CREATE = 7
    ADD_INCL_SRVC = 8
    ADD_CHAR = 9
    ADD_CHAR_DESCR = 10
    DELETE = 11
    START = 12
    STOP = 13
    CONNECT = 14
    DISCONNECT = 15
    OPEN = 16
    CANCEL_OPEN = 17
    CLOSE = 18
    LISTEN = 19
    CONGEST = 20
    RESPONSE = 21
    CREAT_ATTR_TAB = 22
    SET_ATTR_VAL = 23


class GapEvent(IntEnum):
    """BLE GAP callback events that have a name."""

    ADV_DATA_SET_COMPLETE = 0
    SCAN_RSP_DATA_SET_COMPLETE = 1
    SCAN_PARAM_SET_COMPLETE = 2
    SCAN_RESULT = 3
    ADV_DATA_RAW_SET_COMPLETE = 4
    SCAN_RSP_DATA_RAW_SET_COMPLETE = 5
    ADV_START_COMPLETE = 6
    SCAN_START_COMPLETE = 7
    AUTH_CMPL = 8
    KEY = 9
    SEC_REQ = 10
    PASSKEY_NOTIF = 11
    PASSKEY_REQ = 12
    OOB_REQ = 13
    LOCAL_IR = 14
    LOCAL_ER = 15
    NC_REQ = 16
    ADV_STOP_COMPLETE = 17
    SCAN_STOP_COMPLETE = 18
    SET_STATIC_RAND_ADDR = 19
    UPDATE_CONN_PARAMS = 20
    SET_PKT_LENGTH_COMPLETE = 21
    SET_LOCAL_PRIVACY_COMPLETE = 22
    REMOVE_BOND_DEV_COMPLETE = 23
    CLEAR_BOND_DEV_COMPLETE = 24
    GET_BOND_DEV_COMPLETE = 25
    READ_RSSI_COMPLETE = 26


class SearchEvent(IntEnum):
    """GAP search (scan) sub-events."""

    INQ_RES = 0
    INQ_CMPL = 1
    DISC_RES = 2
    DISC_BLE_RES = 3
    DISC_CMPL = 4
    DI_DISC_CMPL = 5
    SEARCH_CANCEL_CMPL = 6


def _lookup(enum_cls: type[IntEnum], value: int) -> IntEnum | None:
    try:
        return enum_cls(value)
    except ValueError:
        return None


def gatt_status_to_string(status: int) -> str:
    """Return the symbolic name of a GATT status, or ``"Unknown"``."""
    member = _lookup(GattStatus, status)
    return f"ESP_GATT_{member.name}" if member is not None else "Unknown"


def gatt_close_reason_to_string(reason: int) -> str:
    """Return the symbolic name of a disconnect reason, or ``"Unknown"``."""
    member = _lookup(ConnReason, reason)
    return f"ESP_GATT_CONN_{member.name}" if member is not None else "Unknown"


def gatt_client_event_type_to_string(event_type: int) -> str:
    """Return the symbolic name of a GATT client event, or ``"Unknown"``."""
    member = _lookup(GattcEvent, event_type)
    if member is None:
        _log.warning("Unknown GATT Client event type: %d", event_type)
        return "Unknown"
    return f"ESP_GATTC_{member.name}_EVT"


def gatt_server_event_type_to_string(event_type: int) -> str:
    """Return the symbolic name of a GATT server event, or ``"Unknown"``."""
    member = _lookup(GattsEvent, event_type)
    return f"ESP_GATTS_{member.name}_EVT" if member is not None else "Unknown"


def gap_event_to_string(event_type: int) -> str:
    """Return the symbolic name of a GAP event, or ``"Unknown event type"``."""
    member = _lookup(GapEvent, event_type)
    if member is None:
        _log.debug(
            "gap_event_to_string: Unknown event type %d 0x%02x", event_type, event_type
        )
        return "Unknown event type"
    return f"ESP_GAP_BLE_{member.name}_EVT"


def search_event_type_to_string(search_evt: int) -> str:
    """Return the symbolic name of a GAP search event, or ``"Unknown event type"``."""
    member = _lookup(SearchEvent, search_evt)
    if member is None:
        _log.debug("Unknown event type: 0x%x", search_evt)
        return "Unknown event type"
    return f"ESP_GAP_SEARCH_{member.name}_EVT"