"""Contains the name for the logger of TabKit modules.

``tabkit`` uses a simple logging system based on the
`Logging <https://docs.python.org/3/library/logging.html>`__ standard library.
Logging messages are grouped in different levels:

* ``DEBUG``: Details of the numerical set-up, such as the detected grid step
    or the stencil chosen for an evaluation point.
* ``WARNING``: An indication that something unexpected
    happened which may require attention, e.g. one method of a comparison
    could not be applied.

By default, only messages of level ``WARNING`` are displayed.

Calling applications can configure the format and log level of the displayed messages
by `Configuring Logging <https://docs.python.org/3/howto/logging.html#configuring-logging>`__
for ``tabkit.logger.tabkit_logger``, e.g.::

    >>> import logging
    >>> logging.basicConfig(
    ...     level=logging.DEBUG,
    ...     format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    ... )
"""
import logging

logger_name = "tabkit"
tabkit_logger = logging.getLogger(logger_name)
