"""
Print election reports to the terminal depending on a verbosity level.

Works like a stripped-down ``logging.Logger`` and is used as a singleton: the engine reports
through the module-level object `output`.

The verbosity levels are:

- CRITICAL
- ERROR
- WARNING
- INFO (result of an election)
- DETAILS (round-by-round report: elected candidate, load distribution, ties)
- DEBUG (scores of all candidates in every round)
- DEBUG2

The default verbosity is `WARNING`, i.e., an election prints nothing.
"""

import textwrap

# should match the values defined in the logging module!
CRITICAL = 50
ERROR = 40
WARNING = 30
INFO = 20
DETAILS = 15
DEBUG = 10
DEBUG2 = 5

DEFAULT = WARNING

WIDTH = 70  # default line width for output

VERBOSITY_TO_NAME = {
    CRITICAL: "CRITICAL",
    ERROR: "ERROR",
    WARNING: "WARNING",
    INFO: "INFO",
    DETAILS: "DETAILS",
    DEBUG: "DEBUG",
    DEBUG2: "DEBUG2",
}

# DETAILS and DEBUG2 are not known to the logging module
_LOGGING_LEVEL = {DETAILS: DEBUG, DEBUG2: DEBUG}


class Output:
    """
    Print messages whose importance is at least the current verbosity level.

    Parameters
    ----------
        verbosity : int
            Verbosity level.

            Minimum level of importance of messages to be printed, as defined by
            constants in this module.

        logger : logging.Logger, optional
            Optional logger.

            Receives every message, independent of `verbosity`; which messages are kept is
            decided by the level of the logger.
    """

    def __init__(self, verbosity=DEFAULT, logger=None):
        self.verbosity = verbosity
        self.logger = logger

    def setup(self, verbosity=DEFAULT, logger=None):
        """
        Set verbosity level and logger at once.

        Parameters
        ----------
            verbosity : int
                Verbosity level.

            logger : logging.Logger, optional
                Logger that receives all messages.
        """
        self.verbosity = verbosity
        self.logger = logger

    def set_verbosity(self, verbosity=DEFAULT):
        """
        Set verbosity level.

        Parameters
        ----------
            verbosity : int
                Verbosity level.
        """
        if verbosity not in VERBOSITY_TO_NAME:
            raise ValueError(
                f"Unknown verbosity level {verbosity}, "
                f"valid levels are {sorted(VERBOSITY_TO_NAME)}."
            )
        self.verbosity = verbosity

    def is_enabled(self, verbosity):
        """Return whether messages of level `verbosity` are printed."""
        return verbosity >= self.verbosity

    def _print(self, verbosity, msg, wrap, indent):
        if self.is_enabled(verbosity):
            if wrap:
                msg = "\n".join(
                    textwrap.fill(
                        line,
                        width=WIDTH,
                        break_long_words=False,
                        initial_indent=indent,
                        subsequent_indent=indent,
                    )
                    for line in msg.split("\n")
                )
            elif indent:
                msg = textwrap.indent(msg, indent)
            print(msg)

        if self.logger:
            self.logger.log(_LOGGING_LEVEL.get(verbosity, verbosity), msg)

    # Parameters of all printing methods:
    #   msg : str, the message
    #   wrap : bool, wrap lines at WIDTH characters
    #   indent : str, prefix for each line

    def debug2(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level DEBUG2."""
        self._print(DEBUG2, msg, wrap, indent)

    def debug(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level DEBUG."""
        self._print(DEBUG, msg, wrap, indent)

    def details(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level DETAILS."""
        self._print(DETAILS, msg, wrap, indent)

    def info(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level INFO."""
        self._print(INFO, msg, wrap, indent)

    def warning(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level WARNING."""
        self._print(WARNING, msg, wrap, indent)

    def error(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level ERROR."""
        self._print(ERROR, msg, wrap, indent)

    def critical(self, msg, wrap=True, indent=""):
        """Print a message with verbosity level CRITICAL."""
        self._print(CRITICAL, msg, wrap, indent)


output = Output()
