import pytest

from blekit.ble_utils import (
    AddressType,
    AdvType,
    BleEventType,
    CharProperty,
    DeviceType,
    GattId,
    GattSrvcId,
    ad_flags_to_string,
    address_type_to_string,
    adv_type_to_string,
    build_gatt_id,
    build_gatt_srvc_id,
    build_hex_data,
    build_print_data,
    characteristic_properties_to_string,
    dev_type_to_string,
    event_type_to_string,
    gatt_id_to_string,
    gatt_service_id_to_string,
    gattc_service_element_to_string,
)
from blekit.uuid import BLEUUID


def test_characteristic_properties_none_set():
    text = characteristic_properties_to_string(0)
    assert text == (
        "broadcast: 0, read: 0, write_nr: 0, write: 0, "
        "notify: 0, indicate: 0, auth: 0"
    )


def test_characteristic_properties_some_set():
    text = characteristic_properties_to_string(CharProperty.READ | CharProperty.NOTIFY)
    assert "read: 1" in text
    assert "notify: 1" in text
    assert "write: 0" in text
    assert text.count(": 1") == 2


def test_address_type_names():
    assert address_type_to_string(AddressType.PUBLIC) == "BLE_ADDR_TYPE_PUBLIC"
    assert address_type_to_string(AddressType.RPA_RANDOM) == "BLE_ADDR_TYPE_RPA_RANDOM"
    assert address_type_to_string(42) == " esp_ble_addr_type_t"


def test_ad_flags_empty_and_combined():
    assert ad_flags_to_string(0) == ""
    text = ad_flags_to_string(0b110)
    assert text == "[LE General Discoverable Mode] [BR/EDR Not Supported] "


def test_ad_flags_all_bits_give_five_items():
    assert ad_flags_to_string(0xFF).count("[") == 5


@pytest.mark.parametrize(
    "adv_type, name",
    [
        (AdvType.FLAG, "ESP_BLE_AD_TYPE_FLAG"),
        (AdvType.SRV128_CMPL, "ESP_BLE_AD_TYPE_128SRV_CMPL"),
        (AdvType.MANUFACTURER_SPECIFIC, "ESP_BLE_AD_MANUFACTURER_SPECIFIC_TYPE"),
        (AdvType.SERVICE_DATA32, "ESP_BLE_AD_TYPE_32SERVICE_DATA"),
    ],
)
def test_adv_type_names(adv_type, name):
    assert adv_type_to_string(adv_type) == name


def test_adv_type_unknown_is_empty():
    assert adv_type_to_string(0x7F) == ""


def test_every_adv_type_has_a_name():
    assert all(adv_type_to_string(member) for member in AdvType)


def test_dev_type_names():
    assert dev_type_to_string(DeviceType.BLE) == "ESP_BT_DEVICE_TYPE_BLE"
    assert dev_type_to_string(DeviceType.DUMO) == "ESP_BT_DEVICE_TYPE_DUMO"
    assert dev_type_to_string(9) == "Unknown"


def test_event_type_names():
    assert event_type_to_string(BleEventType.SCAN_RSP) == "ESP_BLE_EVT_SCAN_RSP"
    assert event_type_to_string(BleEventType.CONN_ADV) == "ESP_BLE_EVT_CONN_ADV"
    assert event_type_to_string(99) == "*** Unknown ***"


def test_build_gatt_id_defaults_and_range():
    uuid = BLEUUID.from_uuid16(0x180D)
    gatt_id = build_gatt_id(uuid)
    assert gatt_id == GattId(uuid, 0)
    assert build_gatt_id(uuid, 3).inst_id == 3
    with pytest.raises(ValueError):
        build_gatt_id(uuid, 256)


def test_build_gatt_srvc_id():
    gatt_id = build_gatt_id(BLEUUID.from_uuid16(0x180F), 1)
    srvc = build_gatt_srvc_id(gatt_id)
    assert srvc == GattSrvcId(gatt_id, True)
    assert build_gatt_srvc_id(gatt_id, False).is_primary is False


def test_build_hex_data():
    assert build_hex_data(b"") == ""
    assert build_hex_data(b"\x01\xab\xff") == "01abff"


def test_build_hex_data_truncates_to_100_bytes():
    assert len(build_hex_data(bytes(150))) == 200


def test_build_print_data():
    assert build_print_data(b"Hi\x00\x7f!") == "Hi..!"
    assert len(build_print_data(bytes(range(256)))) == 256


def test_gatt_id_to_string():
    gatt_id = build_gatt_id(BLEUUID.from_uuid16(0x180D), 2)
    assert gatt_id_to_string(gatt_id) == (
        "uuid: 0000180d-0000-1000-8000-00805f9b34fb, inst_id: 2"
    )


def test_gatt_service_id_to_string_matches_gatt_id():
    gatt_id = build_gatt_id(BLEUUID.from_uuid16(0x1800), 0)
    srvc = build_gatt_srvc_id(gatt_id)
    assert gatt_service_id_to_string(srvc) == gatt_id_to_string(gatt_id)


def test_gattc_service_element_to_string():
    uuid = BLEUUID.from_uuid16(0x180D)
    text = gattc_service_element_to_string(uuid, 40, 255)
    assert text == (
        "[uuid: 0000180d-0000-1000-8000-00805f9b34fb, "
        "start_handle: 40 0x28, end_handle: 255 0xff]"
    )