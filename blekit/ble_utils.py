"""BLE helpers: names for stack constants, GATT ids and data formatting."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import IntEnum, IntFlag

from .uuid import BLEUUID

__all__ = [
    "CharProperty",
    "AddressType",
    "AdvType",
    "DeviceType",
    "BleEventType",
    "GattId",
    "GattSrvcId",
    "characteristic_properties_to_string",
    "address_type_to_string",
    "ad_flags_to_string",
    "adv_type_to_string",
    "dev_type_to_string",
    "event_type_to_string",
    "build_gatt_id",
    "build_gatt_srvc_id",
    "build_hex_data",
    "build_print_data",
    "gatt_id_to_string",
    "gatt_service_id_to_string",
    "gattc_service_element_to_string",
]

_log = logging.getLogger(__name__)

_MAX_HEX_BYTES = 100


class CharProperty(IntFlag):
    """Characteristic property bits."""

    BROADCAST = 1 << 0
    READ = 1 << 1
    WRITE_NR = 1 << 2
    WRITE = 1 << 3
    NOTIFY = 1 << 4
    INDICATE = 1 << 5
    AUTH = 1 << 6
    EXT_PROP = 1 << 7


class AddressType(IntEnum):
    """BLE address types."""

    PUBLIC = 0x00
    RANDOM = 0x01
    RPA_PUBLIC = 0x02
    RPA_RANDOM = 0x03


class AdvType(IntEnum):
    """Advertising data element types."""

    FLAG = 0x01
    SRV16_PART = 0x02
    SRV16_CMPL = 0x03
    SRV32_PART = 0x04
    SRV32_CMPL = 0x05
    SRV128_PART = 0x06
    SRV128_CMPL = 0x07
    NAME_SHORT = 0x08
    NAME_CMPL = 0x09
    TX_PWR = 0x0A
    DEV_CLASS = 0x0D
    SM_TK = 0x10
    SM_OOB_FLAG = 0x11
    INT_RANGE = 0x12
    SOL_SRV_UUID = 0x14
    SOL_SRV_UUID128 = 0x15
    SERVICE_DATA = 0x16
    PUBLIC_TARGET = 0x17
    RANDOM_TARGET = 0x18
    APPEARANCE = 0x19
    ADV_INT = 0x1A
    SOL_SRV_UUID32 = 0x1F
    SERVICE_DATA32 = 0x20
    SERVICE_DATA128 = 0x21
    MANUFACTURER_SPECIFIC = 0xFF


_ADV_TYPE_NAMES: dict[AdvType, str] = {
    AdvType.FLAG: "ESP_BLE_AD_TYPE_FLAG",
    AdvType.SRV16_PART: "ESP_BLE_AD_TYPE_16SRV_PART",
    AdvType.SRV16_CMPL: "ESP_BLE_AD_TYPE_16SRV_CMPL",
    AdvType.SRV32_PART: "ESP_BLE_AD_TYPE_32SRV_PART",
    AdvType.SRV32_CMPL: "ESP_BLE_AD_TYPE_32SRV_CMPL",
    AdvType.SRV128_PART: "ESP_BLE_AD_TYPE_128SRV_PART",
    AdvType.SRV128_CMPL: "ESP_BLE_AD_TYPE_128SRV_CMPL",
    AdvType.NAME_SHORT: "ESP_BLE_AD_TYPE_NAME_SHORT",
    AdvType.NAME_CMPL: "ESP_BLE_AD_TYPE_NAME_CMPL",
    AdvType.TX_PWR: "ESP_BLE_AD_TYPE_TX_PWR",
    AdvType.DEV_CLASS: "ESP_BLE_AD_TYPE_DEV_CLASS",
    AdvType.SM_TK: "ESP_BLE_AD_TYPE_SM_TK",
    AdvType.SM_OOB_FLAG: "ESP_BLE_AD_TYPE_SM_OOB_FLAG",
    AdvType.INT_RANGE: "ESP_BLE_AD_TYPE_INT_RANGE",
    AdvType.SOL_SRV_UUID: "ESP_BLE_AD_TYPE_SOL_SRV_UUID",
    AdvType.SOL_SRV_UUID128: "ESP_BLE_AD_TYPE_128SOL_SRV_UUID",
    AdvType.SERVICE_DATA: "ESP_BLE_AD_TYPE_SERVICE_DATA",
    AdvType.PUBLIC_TARGET: "ESP_BLE_AD_TYPE_PUBLIC_TARGET",
    AdvType.RANDOM_TARGET: "ESP_BLE_AD_TYPE_RANDOM_TARGET",
    AdvType.APPEARANCE: "ESP_BLE_AD_TYPE_APPEARANCE",
    AdvType.ADV_INT: "ESP_BLE_AD_TYPE_ADV_INT",
    AdvType.SOL_SRV_UUID32: "ESP_BLE_AD_TYPE_32SOL_SRV_UUID",
    AdvType.SERVICE_DATA32: "ESP_BLE_AD_TYPE_32SERVICE_DATA",
    AdvType.SERVICE_DATA128: "ESP_BLE_AD_TYPE_128SERVICE_DATA",
    AdvType.MANUFACTURER_SPECIFIC: "ESP_BLE_AD_MANUFACTURER_SPECIFIC_TYPE",
}


class DeviceType(IntEnum):
    """Bluetooth device types."""

    BREDR = 0x01
    BLE = 0x02
    DUMO = 0x03


class BleEventType(IntEnum):
    """Kinds of advertising report received while scanning."""

    CONN_ADV = 0x00
    CONN_DIR_ADV = 0x01
    DISC_ADV = 0x02
    NON_CONN_ADV = 0x03
    SCAN_RSP = 0x04


@dataclass(frozen=True)
class GattId:
    """A GATT attribute id: a UUID and an instance number."""

    uuid: BLEUUID
    inst_id: int = 0


@dataclass(frozen=True)
class GattSrvcId:
    """A GATT service id: an attribute id and whether the service is primary."""

    id: GattId
    is_primary: bool = True


_AD_FLAG_TEXT = (
    "[LE Limited Discoverable Mode] ",
    "[LE General Discoverable Mode] ",
    "[BR/EDR Not Supported] ",
    "[Simultaneous LE and BR/EDR to Same Device Capable (Controller)] ",
    "[Simultaneous LE and BR/EDR to Same Device Capable (Host)] ",
)

_PROPERTY_LABELS = (
    ("broadcast", CharProperty.BROADCAST),
    ("read", CharProperty.READ),
    ("write_nr", CharProperty.WRITE_NR),
    ("write", CharProperty.WRITE),
    ("notify", CharProperty.NOTIFY),
    ("indicate", CharProperty.INDICATE),
    ("auth", CharProperty.AUTH),
)


def characteristic_properties_to_string(prop: int) -> str:
    """Describe characteristic properties as ``name: 0/1`` pairs."""
    return ", ".join(
        f"{label}: {1 if prop & bit else 0}" for label, bit in _PROPERTY_LABELS
    )


def address_type_to_string(kind: int) -> str:
    """Return the symbolic name of a BLE address type."""
    try:
        return f"BLE_ADDR_TYPE_{AddressType(kind).name}"
    except ValueError:
        return " esp_ble_addr_type_t"


def ad_flags_to_string(ad_flags: int) -> str:
    """Describe the advertising flags byte, one bracketed item per set bit."""
    return "".join(
        text for bit, text in enumerate(_AD_FLAG_TEXT) if ad_flags & (1 << bit)
    )


def adv_type_to_string(adv_type: int) -> str:
    """Return the symbolic name of an advertising data type, or ``""``."""
    try:
        return _ADV_TYPE_NAMES[AdvType(adv_type)]
    except ValueError:
        _log.debug(" adv data type: 0x%x", adv_type)
        return ""


def dev_type_to_string(kind: int) -> str:
    """Return the symbolic name of a device type, or ``"Unknown"``."""
    try:
        return f"ESP_BT_DEVICE_TYPE_{DeviceType(kind).name}"
    except ValueError:
        return "Unknown"


def event_type_to_string(event_type: int) -> str:
    """Return the symbolic name of a scan report type."""
    try:
        return f"ESP_BLE_EVT_{BleEventType(event_type).name}"
    except ValueError:
        _log.debug(
            "Unknown esp_ble_evt_type_t: %d (0x%02x)", event_type, event_type
        )
        return "*** Unknown ***"


def build_gatt_id(uuid: BLEUUID, inst_id: int = 0) -> GattId:
    """Build a GATT id from a UUID and an instance number (0 to 255)."""
    if not 0 <= inst_id <= 0xFF:
        raise ValueError(f"instance id out of range: {inst_id}")
    return GattId(uuid, inst_id)


def build_gatt_srvc_id(gatt_id: GattId, is_primary: bool = True) -> GattSrvcId:
    """Build a GATT service id from a GATT id."""
    return GattSrvcId(gatt_id, bool(is_primary))


def build_hex_data(source: bytes | bytearray | memoryview) -> str:
    """Return lower-case hex of at most the first 100 bytes of the data."""
    return bytes(memoryview(source))[:_MAX_HEX_BYTES].hex()


def build_print_data(source: bytes | bytearray | memoryview) -> str:
    """Return the data as text, with non-printable bytes shown as ``.``."""
    return "".join(
        chr(byte) if 0x20 <= byte <= 0x7E else "." for byte in bytes(memoryview(source))
    )


def gatt_id_to_string(gatt_id: GattId) -> str:
    """Describe a GATT id."""
    return f"uuid: {gatt_id.uuid}, inst_id: {gatt_id.inst_id}"


def gatt_service_id_to_string(srvc_id: GattSrvcId) -> str:
    """Describe a GATT service id by its attribute id."""
    return gatt_id_to_string(srvc_id.id)


def gattc_service_element_to_string(
    uuid: BLEUUID, start_handle: int, end_handle: int
) -> str:
    """Describe a discovered service with its handle range."""
    return (
        f"[uuid: {uuid}, start_handle: {start_handle} 0x{start_handle:x}, "
        f"end_handle: {end_handle} 0x{end_handle:x}]"
    )