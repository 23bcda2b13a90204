# Copyright © 2020, Nguyễn Hồng Quân <ng.hong.quan@gmail.com>

import click
import logbook
from logbook.handlers import Handler, StringFormatterHandlerMixin


LOGBOOK_LEVEL_TO_COLOR = {
    logbook.TRACE: 'bright_black',
    logbook.DEBUG: 'bright_black',
    logbook.INFO: None,
    logbook.NOTICE: 'cyan',
    logbook.WARNING: 'yellow',
    logbook.ERROR: 'red',
    logbook.CRITICAL: 'bright_red',
}

DEFAULT_FORMAT_STRING = '[{record.level_name}] {record.channel}: {record.message}'


# Logbook custom handler to print message to stderr, via click so that colors are
# stripped when the output is not a terminal.
class ConsoleLogHandler(Handler, StringFormatterHandlerMixin):
    def __init__(self, level=logbook.INFO, format_string=DEFAULT_FORMAT_STRING, filter=None, bubble=False):
        Handler.__init__(self, level, filter, bubble)
        StringFormatterHandlerMixin.__init__(self, format_string)

    def emit(self, record):
        message = self.format(record)
        color = LOGBOOK_LEVEL_TO_COLOR.get(record.level)
        click.secho(message, fg=color, err=True)
