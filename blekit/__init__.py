"""Bluetooth Low Energy helpers: UUIDs, GATT/GAP names, formatting, general utilities and HID keymaps."""

__version__ = "0.1.0"

__all__ = [
    "ble_utils",
    "gatt_names",
    "general_utils",
    "hid_keyboard",
    "uuid",
]