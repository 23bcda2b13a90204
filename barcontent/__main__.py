# Copyright © 2020, Nguyễn Hồng Quân <ng.hong.quan@gmail.com>

# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at

#       http://www.apache.org/licenses/LICENSE-2.0

# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from typing import assert_never

import click
import logbook

from . import __version__
from .consts import ENV_VERBOSE, SHORT_NAME, WifiAuthType
from .logging import ConsoleLogHandler
from .messages import WifiInfoMessage, serialize_wifi_message
from .results import ParsedResult, TextResult, UrlResult, WifiResult, parse_result


def format_result(result: ParsedResult) -> list[tuple[str, str | None]]:
    match result:
        case WifiResult(record):
            rows = [
                ('ssid', record.ssid),
                ('password', record.password),
                ('encryption', record.encryption),
                ('hidden', 'yes' if record.hidden else 'no'),
            ]
            eap_rows = [
                ('eap_method', record.eap_method),
                ('phase2_method', record.phase2_method),
                ('identity', record.identity),
                ('anonymous_identity', record.anonymous_identity),
            ]
            rows.extend(r for r in eap_rows if r[1] is not None)
            return rows
        case UrlResult(url):
            return [('url', url.geturl()), ('scheme', url.scheme), ('host', url.hostname)]
        case TextResult(text):
            return [('text', text)]
        case _:
            assert_never(result)


@click.group()
@click.version_option(__version__, prog_name=SHORT_NAME)
@click.option('--verbose', '-v', is_flag=True, envvar=ENV_VERBOSE, help='Show debug log.')
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    # NullHandler stops records below our level from reaching logbook's default handler.
    log_setup = logbook.NestedSetup([
        logbook.NullHandler(),
        ConsoleLogHandler(level=logbook.DEBUG if verbose else logbook.INFO),
    ])
    log_setup.push_application()
    ctx.call_on_close(log_setup.pop_application)


@cli.command()
@click.argument('text', required=False)
@click.option('--symbology', '-s', help='Barcode type which the text was decoded from, e.g. QR-Code.')
def parse(text: str | None, symbology: str | None):
    """Tell what the decoded TEXT of a barcode is. Read from stdin if TEXT is omitted."""
    if text is None:
        text = click.get_text_stream('stdin').read().removesuffix('\n')
    result = parse_result(text, symbology)
    click.echo(f'type: {result.type}')
    for name, value in format_result(result):
        click.echo(f'{name}: {"-" if value is None else value}')


@cli.command()
@click.option('--ssid', required=True)
@click.option('--password', '-p')
@click.option('--auth-type', '-t', type=click.Choice([a.value for a in WifiAuthType]),
              default=WifiAuthType.WPA.value, show_default=True)
@click.option('--hidden', is_flag=True)
def generate(ssid: str, password: str | None, auth_type: str, hidden: bool):
    """Make the text of a WiFi QR code."""
    wifi_info = WifiInfoMessage(ssid=ssid, password=password, auth_type=auth_type, hidden=hidden)
    click.echo(serialize_wifi_message(wifi_info))


def main():
    return cli(prog_name=SHORT_NAME)


if __name__ == '__main__':
    main()
