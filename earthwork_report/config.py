"""Configuration settings for the earthwork report.

This module centralizes the report layout, messages and logging
settings for easy maintenance and extension.
"""


class Config:
    """Application configuration."""

    # Application info
    APP_NAME = "Earthwork Cross-Section Volume Report"
    VERSION = "1.0.0"

    # Logging
    LOG_LEVEL = "INFO"  # DEBUG, INFO, WARNING, ERROR, CRITICAL

    # Report layout
    RULE_WIDTH = 120
    REPORT_TITLE = "EXCAVATION AND FILLING VOLUME INFORMATION - CROSS SECTION"
    VOLUME_UNIT = "m³"
    STATION_DECIMALS = 3
    VOLUME_DECIMALS = 2

    # (header, width) in display order
    COLUMNS = [
        ("Material List", 20),
        ("Material", 15),
        ("Start Stn", 12),
        ("End Stn", 12),
        ("Cut Vol", 12),
        ("Fill Vol", 12),
        ("Net Vol", 12),
        ("Cum Cut", 12),
        ("Cum Fill", 12),
    ]

    # User-visible messages
    MSG_CANCELLED = "Command cancelled."
    MSG_BAD_ALIGNMENT = "Failed to get Alignment object."
    MSG_NO_MATERIAL_LISTS = "No Material Lists found for the selected Alignment."
    MSG_NO_VOLUME_DATA = "No volume data found."

    # Export column names
    EXPORT_COLUMNS = [
        "Material List",
        "Material Name",
        "Station Start",
        "Station End",
        "Cut Volume (m³)",
        "Fill Volume (m³)",
        "Net Volume (m³)",
        "Cumulative Cut (m³)",
        "Cumulative Fill (m³)",
    ]

    # Output settings
    JSON_INDENT = 2
