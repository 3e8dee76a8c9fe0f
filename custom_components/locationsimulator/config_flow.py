"""Config flow for Location Simulator integration."""
from __future__ import annotations
import logging
import uuid
from typing import Any, Dict, Optional
import homeassistant.helpers.config_validation as cv
import voluptuous as vol

from homeassistant import config_entries
from homeassistant.core import callback

from .const import (
    CONF_DEFAULT_MOVE_TYPE,
    CONF_ENTRY_NAME,
    CONF_GUID,
    DEFAULT_ENTRY_NAME,
    DEFAULT_MOVE_TYPE,
    DOMAIN,
)
from .models import MoveType

MOVE_TYPE_OPTIONS = [move_type.option for move_type in MoveType]

_LOGGER = logging.getLogger(__name__)


def _build_schema(entry_name: str, default_move_type: str) -> vol.Schema:
    return vol.Schema(
        {
            vol.Required(CONF_ENTRY_NAME, default=entry_name): cv.string,
            vol.Required(CONF_DEFAULT_MOVE_TYPE, default=default_move_type): vol.In(MOVE_TYPE_OPTIONS),
        }
    )


CONFIG_SCHEMA = _build_schema(DEFAULT_ENTRY_NAME, DEFAULT_MOVE_TYPE)


class CustomFlow(config_entries.ConfigFlow, domain=DOMAIN):
    data: Optional[Dict[str, Any]]

    async def async_step_user(self, user_input: Optional[Dict[str, Any]] = None):
        errors: Dict[str, str] = {}
        if user_input is not None:
            self.data = dict(user_input)
            # Create new guid for the entry
            self.data[CONF_GUID] = str(uuid.uuid4())
            if not self.data.get(CONF_ENTRY_NAME):
                errors['base'] = 'entry_name_required'
            if not errors:
                return self.async_create_entry(title=f"{self.data[CONF_ENTRY_NAME]}", data=self.data)

        return self.async_show_form(step_id="user", data_schema=CONFIG_SCHEMA, errors=errors)

    @staticmethod
    @callback
    def async_get_options_flow(config_entry):
        """Get the options flow for this handler."""
        return OptionsFlowHandler(config_entry)


class OptionsFlowHandler(config_entries.OptionsFlow):
    """Handles options flow for the component."""

    def __init__(self, config_entry: config_entries.ConfigEntry) -> None:
        self._entry = config_entry

    def _current(self, key: str, default: Any) -> Any:
        if key in self._entry.options:
            return self._entry.options[key]
        return self._entry.data.get(key, default)

    async def async_step_init(
        self, user_input: Dict[str, Any] = None
    ) -> Dict[str, Any]:
        errors: Dict[str, str] = {}

        if user_input is not None:
            if not user_input.get(CONF_ENTRY_NAME):
                errors['base'] = 'entry_name_required'
            if not errors:
                new_options = {
                    CONF_ENTRY_NAME: user_input[CONF_ENTRY_NAME],
                    CONF_DEFAULT_MOVE_TYPE: user_input[CONF_DEFAULT_MOVE_TYPE],
                }
                # Rename the entry in the UI
                self.hass.config_entries.async_update_entry(
                    self._entry, title=new_options[CONF_ENTRY_NAME]
                )
                return self.async_create_entry(title=new_options[CONF_ENTRY_NAME], data=new_options)

        options_schema = _build_schema(
            self._current(CONF_ENTRY_NAME, DEFAULT_ENTRY_NAME),
            self._current(CONF_DEFAULT_MOVE_TYPE, DEFAULT_MOVE_TYPE),
        )
        return self.async_show_form(step_id="init", data_schema=options_schema, errors=errors)
