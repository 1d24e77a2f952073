"""Default configuration values."""
from enum import Enum


class LogLevel(str, Enum):
    """Log level enumeration."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogDestination(str, Enum):
    """Log destination enumeration."""
    FILE = "file"
    STDOUT = "stdout"
    BOTH = "both"


DEFAULT_CONFIG = {
    "version": "1.0",

    # Logging configuration
    "logging": {
        "level": "${DECORUM_LOG_LEVEL:WARNING}",
        "destination": "${DECORUM_LOG_DESTINATION:stdout}",
        "file_path": "${DECORUM_LOG_DIR:logs}/decorum.log",
        "max_size_mb": 10,
        "backup_count": 5,
        "format": "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
    },

    # Named chains
    "chains": {
        "boosted_speaker": {
            "description": "Speaker with both boosts applied",
            "subject": {"kind": "speaker", "values": {"power": 110.0, "bass": 1.0}},
            "decorators": ["bass_boost", "power_boost"],
        },
        "cheese_pizza": {
            "description": "Thin crust pizza with cheese",
            "subject": {"kind": "pizza", "values": {"cost": 1.99, "description": "thin crust"}},
            "decorators": ["cheese"],
        },
    },
}
