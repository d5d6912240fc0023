# blekit

Pure-Python helpers for Bluetooth Low Energy data: UUIDs in their 16-, 32-
and 128-bit forms, readable names for GATT and GAP codes, formatting of GATT
ids, characteristic properties and advertising data, a few general string
and base64 helpers, and HID keyboard keymaps for US and UK layouts.

## Installation

```
pip install blekit
```

## UUIDs — `blekit.uuid`

```python
from blekit.uuid import BLEUUID

hr = BLEUUID.from_string("0x180d")
hr.bit_size()   # 16
str(hr)         # "0000180d-0000-1000-8000-00805f9b34fb"

full = BLEUUID.from_string("0000180d-0000-1000-8000-00805f9b34fb")
assert hr == full          # short and full forms compare equal
hr.to128().bit_size()      # 128
```

`from_string` accepts `NNNN`, `NNNNNNNN` or the dashed 128-bit form, each
optionally prefixed with `0x`; text of any other length gives an unset UUID.
Other constructors are `from_uuid16`, `from_uuid32`, `from_bytes(data,
msb_first)` (exactly 16 bytes) and `from_data` (2, 4 or 16 raw bytes, or
36 characters of dashed hex). Bad lengths or values raise `ValueError`.

`BLEUUID()` is unset: `is_set()` is `False`, `bit_size()` is 0, it prints as
`<NULL>`, and it compares unequal to every UUID, itself included. UUIDs are
immutable and hashable.

## GATT and GAP names — `blekit.gatt_names`

```python
from blekit.gatt_names import GattStatus, gatt_status_to_string, gap_event_to_string

gatt_status_to_string(GattStatus.OK)   # "ESP_GATT_OK"
gatt_status_to_string(0x42)            # "Unknown"
gap_event_to_string(3)                 # "ESP_GAP_BLE_SCAN_RESULT_EVT"
```

The enums `GattStatus`, `ConnReason`, `GattcEvent`, `GattsEvent`, `GapEvent`
and `SearchEvent` hold the codes; `gatt_close_reason_to_string`,
`gatt_client_event_type_to_string`, `gatt_server_event_type_to_string` and
`search_event_type_to_string` name them.

## BLE formatting — `blekit.ble_utils`

```python
from blekit.ble_utils import (
    CharProperty, build_gatt_id, gatt_id_to_string,
    characteristic_properties_to_string, ad_flags_to_string, build_hex_data,
)
from blekit.uuid import BLEUUID

characteristic_properties_to_string(CharProperty.READ | CharProperty.NOTIFY)
# "broadcast: 0, read: 1, write_nr: 0, write: 0, notify: 1, indicate: 0, auth: 0"

ad_flags_to_string(0x06)
# "[LE General Discoverable Mode] [BR/EDR Not Supported] "

gatt_id_to_string(build_gatt_id(BLEUUID.from_uuid16(0x180D)))
# "uuid: 0000180d-0000-1000-8000-00805f9b34fb, inst_id: 0"

build_hex_data(b"\x01\xab")   # "01ab" (at most the first 100 bytes)
```

Also here: `address_type_to_string`, `adv_type_to_string`,
`dev_type_to_string`, `event_type_to_string`, `build_gatt_srvc_id`,
`gatt_service_id_to_string`, `gattc_service_element_to_string` and
`build_print_data`, with the enums `AddressType`, `AdvType`, `DeviceType`
and `BleEventType` and the frozen dataclasses `GattId` and `GattSrvcId`.

## General helpers — `blekit.general_utils`

```python
from blekit.general_utils import base64_encode, base64_decode, hex_dump, split, error_to_string

base64_encode(b"hi")          # "aGk="
base64_decode("aGk")          # b"hi" (padding optional; bad input raises ValueError)
split(" a , b ,c", ",")       # ["a", "b", "c"]
error_to_string(0x101)        # "No memory"
for line in hex_dump(b"hello"):
    print(line)               # header line, then offset, hex and ASCII columns
```

`hex_dump` returns its lines and also sends them to the debug log. Other
helpers are `ends_with`, `ip_to_string`, `to_lower` (ASCII only) and `trim`
(spaces only), and the `EspError` enum.

## HID keyboard — `blekit.hid_keyboard`

```python
from blekit.hid_keyboard import FunctionKey, Layout, key_for, keymap

key_for("@", Layout.US)            # KeyEntry(usage=0x1f, modifier=ModifierKey.SHIFT)
key_for("@", Layout.UK)            # KeyEntry(usage=0x34, modifier=ModifierKey.SHIFT)
key_for(FunctionKey.F1)            # KeyEntry(usage=0x3a, ...)
len(keymap(Layout.UK))             # 152
```

`key_for` takes a single character, an ASCII code or a `FunctionKey`; it
raises `ValueError` outside the keymap and `TypeError` for `MediaKey` values.
The default layout is UK.

## What this package does not do

It only models and formats Bluetooth data; it does not talk to any Bluetooth
adapter, scan, connect or send reports. It has no tables of Bluetooth SIG
assigned numbers, so it cannot turn service, characteristic, descriptor or
company ids into names, and it has no type for assembling a characteristic
value from several written parts.

## Running the tests

```
pip install "blekit[test]"
pytest
```