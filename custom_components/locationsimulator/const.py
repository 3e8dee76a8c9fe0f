DOMAIN = "locationsimulator"
VERSION = "0.3.0"

# Config entry keys
CONF_GUID = "guid"
CONF_ENTRY_NAME = "entry_name"
CONF_DEFAULT_MOVE_TYPE = "default_move_type"

DEFAULT_ENTRY_NAME = "Location Simulator"
DEFAULT_MOVE_TYPE = "walk"

# Device lifecycle events fired on the Home Assistant bus by the device bridge.
EVENT_DEVICE_CONNECTED = f"{DOMAIN}_device_connected"
EVENT_DEVICE_PAIRED = f"{DOMAIN}_device_paired"
EVENT_DEVICE_DISCONNECTED = f"{DOMAIN}_device_disconnected"

# Fired whenever the map's autofocus-on-current-location preference changes.
EVENT_AUTOFOCUS_CHANGED = f"{DOMAIN}_autofocus_changed"

# Fired when a dependent action is pressed; consumed by the spoofing engine.
EVENT_ACTION = f"{DOMAIN}_action"

ATTR_UDID = "udid"
ATTR_ENABLED = "enabled"
ATTR_ACTION = "action"

# Dispatcher signals, formatted with the config entry id
SIGNAL_WILL_CHANGE_LOCATION = f"{DOMAIN}_will_change_location_{{}}"
SIGNAL_DID_CHANGE_LOCATION = f"{DOMAIN}_did_change_location_{{}}"
