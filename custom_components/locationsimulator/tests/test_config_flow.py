"""
Unit tests for config_flow.py — CustomFlow (initial setup) and OptionsFlowHandler (options editing).

Coverage:
- CustomFlow.async_step_user:
    * GET (no input) → returns FORM with step_id "user"
    * Valid input → CREATE_ENTRY with correct title, data fields and a generated guid
    * Empty entry_name → FORM with errors["base"] == "entry_name_required"
    * Unknown move type is rejected by the schema

- OptionsFlowHandler.async_step_init:
    * GET (no input) → returns FORM with step_id "init", defaults come from config_entry.data
    * Defaults from config_entry.options override config_entry.data
    * Valid user input → CREATE_ENTRY and the entry is renamed
    * Empty entry_name → FORM with errors["base"] == "entry_name_required"
"""

from __future__ import annotations

import unittest
import uuid
from typing import Any, Dict
from unittest.mock import MagicMock

import voluptuous as vol

from custom_components.locationsimulator.config_flow import (
    CONFIG_SCHEMA,
    MOVE_TYPE_OPTIONS,
    CustomFlow,
    OptionsFlowHandler,
)


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _make_mock_config_entry(data: Dict[str, Any], options: Dict[str, Any] | None = None) -> MagicMock:
    """Return a minimal mock ConfigEntry with .data and .options dicts."""
    entry = MagicMock()
    entry.data = dict(data)
    entry.options = dict(options) if options is not None else {}
    return entry


def _make_flow() -> CustomFlow:
    """Return a CustomFlow instance with a mocked hass."""
    flow = CustomFlow()
    flow.hass = MagicMock()
    return flow


def _make_options_flow(data: Dict[str, Any], options: Dict[str, Any] | None = None) -> OptionsFlowHandler:
    """Return an OptionsFlowHandler instance with a mocked hass."""
    entry = _make_mock_config_entry(data, options)
    handler = OptionsFlowHandler(entry)
    handler.hass = MagicMock()
    return handler


def _schema_defaults(result) -> dict:
    schema = result["data_schema"].schema
    return {
        str(key): key.default()
        for key in schema
        if hasattr(key, "default") and callable(key.default)
    }


VALID_USER_INPUT = {
    "entry_name": "Desk Phones",
    "default_move_type": "cycle",
}

VALID_ENTRY_DATA = {
    "guid": "existing-guid-1234",
    "entry_name": "Original Name",
    "default_move_type": "walk",
}

VALID_OPTIONS_INPUT = {
    "entry_name": "Updated Name",
    "default_move_type": "drive",
}


# ---------------------------------------------------------------------------
# CustomFlow — initial config
# ---------------------------------------------------------------------------

class TestCustomFlow(unittest.IsolatedAsyncioTestCase):
    """Tests for CustomFlow.async_step_user."""

    async def test_shows_form_on_get(self):
        """Calling without input must return a FORM with step_id 'user'."""
        flow = _make_flow()

        result = await flow.async_step_user(user_input=None)

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["step_id"], "user")
        self.assertEqual(result.get("errors", {}), {})

    async def test_valid_input_creates_entry(self):
        flow = _make_flow()

        result = await flow.async_step_user(user_input=dict(VALID_USER_INPUT))

        self.assertEqual(result["type"], "create_entry")
        self.assertEqual(result["title"], VALID_USER_INPUT["entry_name"])
        self.assertEqual(result["data"]["entry_name"], VALID_USER_INPUT["entry_name"])
        self.assertEqual(result["data"]["default_move_type"], VALID_USER_INPUT["default_move_type"])

    async def test_creates_entry_with_valid_guid(self):
        """A fresh UUID must be generated and stored as 'guid' in entry data."""
        flow = _make_flow()

        result = await flow.async_step_user(user_input=dict(VALID_USER_INPUT))

        generated_guid = result["data"]["guid"]
        self.assertEqual(str(uuid.UUID(generated_guid)), generated_guid)

    async def test_two_entries_get_different_guids(self):
        first = await _make_flow().async_step_user(user_input=dict(VALID_USER_INPUT))
        second = await _make_flow().async_step_user(user_input=dict(VALID_USER_INPUT))

        self.assertNotEqual(first["data"]["guid"], second["data"]["guid"])

    async def test_empty_entry_name_returns_form_with_error(self):
        flow = _make_flow()

        result = await flow.async_step_user(user_input=dict(VALID_USER_INPUT, entry_name=""))

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["errors"]["base"], "entry_name_required")


class TestConfigSchema(unittest.TestCase):

    def test_defaults(self):
        self.assertEqual(
            CONFIG_SCHEMA({}),
            {"entry_name": "Location Simulator", "default_move_type": "walk"},
        )

    def test_move_type_options(self):
        self.assertEqual(MOVE_TYPE_OPTIONS, ["walk", "cycle", "drive"])

    def test_unknown_move_type_rejected(self):
        with self.assertRaises(vol.Invalid):
            CONFIG_SCHEMA({"entry_name": "x", "default_move_type": "fly"})


# ---------------------------------------------------------------------------
# OptionsFlowHandler — options editing
# ---------------------------------------------------------------------------

class TestOptionsFlowHandler(unittest.IsolatedAsyncioTestCase):
    """Tests for OptionsFlowHandler.async_step_init."""

    async def test_shows_form_on_get(self):
        handler = _make_options_flow(VALID_ENTRY_DATA)

        result = await handler.async_step_init(user_input=None)

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["step_id"], "init")
        self.assertEqual(result.get("errors", {}), {})

    async def test_form_defaults_come_from_entry_data(self):
        handler = _make_options_flow(VALID_ENTRY_DATA, options={})

        defaults = _schema_defaults(await handler.async_step_init(user_input=None))

        self.assertEqual(defaults["entry_name"], VALID_ENTRY_DATA["entry_name"])
        self.assertEqual(defaults["default_move_type"], VALID_ENTRY_DATA["default_move_type"])

    async def test_options_override_data_defaults(self):
        overriding_options = {"entry_name": "Options Name", "default_move_type": "drive"}
        handler = _make_options_flow(VALID_ENTRY_DATA, options=overriding_options)

        defaults = _schema_defaults(await handler.async_step_init(user_input=None))

        self.assertEqual(defaults["entry_name"], "Options Name")
        self.assertEqual(defaults["default_move_type"], "drive")

    async def test_valid_update_creates_entry(self):
        handler = _make_options_flow(VALID_ENTRY_DATA)

        result = await handler.async_step_init(user_input=dict(VALID_OPTIONS_INPUT))

        self.assertEqual(result["type"], "create_entry")
        self.assertEqual(result["data"], VALID_OPTIONS_INPUT)

    async def test_valid_update_renames_entry(self):
        handler = _make_options_flow(VALID_ENTRY_DATA)

        await handler.async_step_init(user_input=dict(VALID_OPTIONS_INPUT))

        handler.hass.config_entries.async_update_entry.assert_called_once_with(
            handler._entry, title=VALID_OPTIONS_INPUT["entry_name"]
        )

    async def test_empty_entry_name_returns_form_with_error(self):
        handler = _make_options_flow(VALID_ENTRY_DATA)

        result = await handler.async_step_init(user_input=dict(VALID_OPTIONS_INPUT, entry_name=""))

        self.assertEqual(result["type"], "form")
        self.assertEqual(result["errors"]["base"], "entry_name_required")
        handler.hass.config_entries.async_update_entry.assert_not_called()
