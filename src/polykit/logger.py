"""Contains the name for the logger of PolyKit modules.

``polykit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Details about why a query produced no result, and about
    root-solver registration.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. a polynomial whose order
    exceeds the shared basis table.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``polykit.logger.polykit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "polykit"
polykit_logger = logging.getLogger(logger_name)
