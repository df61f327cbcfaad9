#!/usr/bin/env python3
#-*- coding: utf-8 -*-
#
# Sortable Section Encoding
# Copyright (C) 2025 [Your Name/Institution]
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
#
# Filename: src/config_loader.py

"""
Configuration Loader (config_loader.py)

Loads the optional `config.ini` and `.env` files that supply defaults for the
`sortcode` command-line tool. The codec modules themselves take every setting
as an explicit argument and never read this configuration.

Key Features:
-   **Loads `config.ini`**: Parsed into the global `APP_CONFIG` object. The
    file named by the `SORTCODE_CONFIG_OVERRIDE` environment variable wins;
    otherwise `config.ini` at the project root is used. An installed copy has
    no project root and reads only the override.
-   **Loads `.env`**: Environment variables from a `.env` file at the
    project root, via python-dotenv.
-   **Safe Value Retrieval**: `get_config_value()` returns typed values
    (str, int, float, bool) with fallbacks and inline-comment stripping.

Recognised settings:
    [Codec]
    strict_decode = false      ; reject non-canonical input by default

    [CLI]
    input_format = hex         ; hex, text or int
    log_level = WARNING

Usage by other scripts:
    from config_loader import APP_CONFIG, get_config_value

    strict = get_config_value(APP_CONFIG, 'Codec', 'strict_decode',
                              value_type=bool, fallback=False)
"""

import configparser
import logging
import os
import pathlib

from dotenv import load_dotenv

CONFIG_FILENAME = "config.ini"
DOTENV_FILENAME = ".env"
CONFIG_OVERRIDE_ENV_VAR = "SORTCODE_CONFIG_OVERRIDE"

logger = logging.getLogger(__name__)
if not logger.hasHandlers():
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
    logger.addHandler(handler)
    logger.setLevel(logging.INFO)


def get_project_root():
    """
    Searches upwards from this file for pyproject.toml.

    Returns None for an installed copy, which has no pyproject.toml above it.
    Only SORTCODE_CONFIG_OVERRIDE is consulted then; files in the working
    directory are never picked up.
    """
    current_path = pathlib.Path(__file__).resolve()
    while current_path != current_path.parent:
        if (current_path / "pyproject.toml").exists():
            return str(current_path)
        current_path = current_path.parent
    return None


PROJECT_ROOT = get_project_root()


def load_app_config(config_path: str = None) -> configparser.ConfigParser:
    """Reads config.ini (or an override) into a ConfigParser; missing files yield an empty config."""
    config = configparser.ConfigParser()

    if config_path is None:
        override_path = os.getenv(CONFIG_OVERRIDE_ENV_VAR)
        if override_path and os.path.exists(override_path):
            config_path = override_path
            logger.debug(f"Using override config from env var: {config_path}")
        elif PROJECT_ROOT is not None:
            config_path = os.path.join(PROJECT_ROOT, CONFIG_FILENAME)
        else:
            logger.debug("No project root and no override config. Using built-in defaults.")
            return config

    if not os.path.exists(config_path):
        logger.debug(f"{CONFIG_FILENAME} not found at {config_path}. Using built-in defaults.")
        return config

    try:
        # utf-8-sig tolerates a BOM written by some Windows editors
        config.read(config_path, encoding='utf-8-sig')
        logger.debug(f"Successfully loaded configuration from: {config_path}")
    except configparser.Error as e:
        logger.error(f"Error parsing configuration file {config_path}: {e}")
    return config


def load_env_vars() -> bool:
    """Loads environment variables from the .env file at the project root, if any."""
    if PROJECT_ROOT is None:
        return False
    dotenv_path = os.path.join(PROJECT_ROOT, DOTENV_FILENAME)
    if not os.path.exists(dotenv_path):
        return False
    if load_dotenv(dotenv_path):
        logger.debug(f"Successfully loaded .env file from: {dotenv_path}")
        return True
    logger.warning(f"Found .env file at {dotenv_path}, but it may be empty or failed to load.")
    return False


def _strip_inline_comment(raw_value: str) -> str:
    cleaned_value = raw_value
    for comment_char in (';', '#'):
        if comment_char in cleaned_value:
            cleaned_value = cleaned_value.split(comment_char, 1)[0]
    return cleaned_value.strip()


def get_config_value(config: configparser.ConfigParser, section: str, key: str,
                     fallback=None, value_type=str):
    """
    Gets a typed value from a ConfigParser, with a fallback.

    Inline `;` and `#` comments are stripped before conversion.

    Args:
        config (configparser.ConfigParser): The loaded config object.
        section (str): The section name in the INI file.
        key (str): The key name in the section.
        fallback: Returned if no key is found or conversion fails.
        value_type (type): One of str, int, float, bool.

    Returns:
        The configured value converted to value_type, or the fallback.
    """
    if not config.has_section(section) or not config.has_option(section, key):
        return fallback

    raw_value = config.get(section, key)
    cleaned_value = _strip_inline_comment(raw_value)

    if value_type == str:
        if cleaned_value.lower() == 'none':
            return None
        return cleaned_value

    if value_type == bool:
        lowered = cleaned_value.lower()
        if lowered in configparser.ConfigParser.BOOLEAN_STATES:
            return configparser.ConfigParser.BOOLEAN_STATES[lowered]
    elif value_type in (int, float):
        try:
            return value_type(cleaned_value)
        except ValueError:
            pass
    else:
        logger.error(f"Config: Unsupported value_type '{value_type.__name__}' for key '{key}'. Using fallback.")
        return fallback

    logger.warning(f"Config: Error converting [{section}]/{key} value '{raw_value}' "
                   f"to {value_type.__name__}. Using fallback: {fallback}")
    return fallback


# Loaded once: .env first so it can set SORTCODE_CONFIG_OVERRIDE
ENV_LOADED = load_env_vars()
APP_CONFIG = load_app_config()

# === End of src/config_loader.py ===
