import importlib
import logging

import transit_station.main


def test_import_leaves_root_logger_alone():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    importlib.reload(transit_station.main)
    assert root.handlers == handlers
    assert root.level == level
