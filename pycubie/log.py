import logging

LOGGER = logging.getLogger("pycubie")
