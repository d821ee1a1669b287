"""
framemarker: annotate ant activity on still video frames.

This package provides:
- FrameViewerWidget: NiceGUI frame viewer with marker placement and editing
- MarkerController: UI-agnostic event-to-edit logic with hit-testing
- Viewport mapping between surface and frame coordinates
- Logging utilities for library and application use

For logging configuration in standalone scripts/demos:
    ```python
    from framemarker.utils.logging import configure_logging
    configure_logging(level="DEBUG")
    ```

When used as a library, logging is handled by the parent application's
configuration.
"""

import logging

from framemarker.utils.logging import configure_logging, get_logger

# NullHandler so logs don't reach the root logger's last-resort handler when no
# application has configured logging. configure_logging() adds a real handler.
_logger = logging.getLogger("framemarker")
if not _logger.handlers:
    _logger.addHandler(logging.NullHandler())

__all__ = [
    "configure_logging",
    "get_logger",
]

__version__ = "0.1.0"
