"""Runtime settings for the kneeboard command line.

Values are read from the environment (optionally populated from a ``.env``
file by the CLI before settings are built):

- ``KNEEBOARD_INPUT`` — default plan definition file
- ``KNEEBOARD_OUTPUT`` — default PDF output file
- ``KNEEBOARD_TEMPLATE`` — default template file name
- ``KNEEBOARD_LOG_LEVEL`` — logging level name (``INFO`` unless set)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_INPUT = "kneeboard-notes.yaml"
DEFAULT_OUTPUT = "kneeboard-notes.pdf"
DEFAULT_TEMPLATE = "kneeboard-notes-template.yaml"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    input_path: str = DEFAULT_INPUT
    output_path: str = DEFAULT_OUTPUT
    template_path: str = DEFAULT_TEMPLATE
    log_level: str = DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            input_path=os.environ.get("KNEEBOARD_INPUT", DEFAULT_INPUT),
            output_path=os.environ.get("KNEEBOARD_OUTPUT", DEFAULT_OUTPUT),
            template_path=os.environ.get("KNEEBOARD_TEMPLATE", DEFAULT_TEMPLATE),
            log_level=os.environ.get("KNEEBOARD_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
