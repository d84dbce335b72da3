from . import service
from . import utils
from .resolver import resolve
from cliff.app import App
from cliff.command import Command
from cliff.commandmanager import CommandManager
from cliff.lister import Lister
from functools import partial
from importlib import metadata
import argparse
import logging
import sys
import yaml


class CLIApp(App):
    """
    command line interface
    """
    specifier = 'mandelq.cli'
    version = metadata.version('mandelq')
    log = logging.getLogger(__name__)

    def __init__(self, stdin=None, stdout=None, stderr=None):
        super(CLIApp, self).__init__(
            description=self.specifier,
            version=self.version,
            command_manager=CommandManager(self.specifier),
            stdin=stdin,
            stdout=stdout,
            stderr=stderr,
        )
        self.msg = partial(utils.msg,
                           printer=partial(utils.puts,
                                           stream=self.stdout))


def load_config(filename):
    """
    Read a YAML mapping of renderer settings
    """
    with open(filename) as stream:
        data = yaml.safe_load(stream) or {}
    if not isinstance(data, dict):
        raise argparse.ArgumentTypeError("%s does not hold a mapping" % filename)
    return data


class RenderCommand(object):
    """
    Options shared by the commands that drive a `Renderer`
    """
    service = 'mandelq.render.Renderer'
    msg = utils.app_attr('msg')

    # flag dest -> renderer setting
    options = (
        ('min_real', '--min-real', float),
        ('min_imag', '--min-imag', float),
        ('span_real', '--span', float),
        ('width', '--width', int),
        ('height', '--height', int),
        ('max_iter', '--max-iter', int),
        ('max_bound', '--max-bound', float),
        ('workers', '--workers', int),
        ('async_handler', '--async-handler', str),
    )

    def add_render_arguments(self, parser):
        parser.add_argument("--config", type=load_config, default={},
                            help="YAML file with the settings for the render")
        defaults = setting_defaults(self.service)
        for dest, flag, ctor in self.options:
            setting = defaults[dest]
            parser.add_argument(flag, dest=dest, type=ctor, default=None,
                                help="%s (default: %s)" % (setting.help, setting.default))
        return parser

    def render_config(self, pargs):
        config = dict(pargs.config)
        for dest, flag, ctor in self.options:
            value = getattr(pargs, dest)
            if value is not None:
                config[dest] = value
        return config


def setting_defaults(spec):
    return resolve(spec)._defaults


class Render(RenderCommand, Command):
    """
    Render the Mandelbrot set to a 16 bit PPM image
    """

    def get_parser(self, prog_name):
        parser = super(Render, self).get_parser(prog_name)
        self.add_render_arguments(parser)
        parser.add_argument('--output', '-o', default=None,
                            help="Where to write the image (default: mb.ppm)")
        return parser

    def take_action(self, pargs):
        config = self.render_config(pargs)
        if pargs.output is not None:
            config['output'] = pargs.output

        with service.app(self.service, config) as renderer:
            with self.msg("Rendering %dx%d with %d workers"
                              % (renderer.width, renderer.height, renderer.workers)):
                buffer, reports = renderer.render()
            with self.msg("Writing %s" % renderer.output):
                renderer.write(buffer)
        return 0


class Rows(RenderCommand, Lister):
    """
    Render without writing and show which rows each worker took
    """
    def get_parser(self, prog_name):
        parser = super(Rows, self).get_parser(prog_name)
        self.add_render_arguments(parser)
        return parser

    def take_action(self, pargs):
        with service.app(self.service, self.render_config(pargs)) as renderer:
            buffer, reports = renderer.render()

        out = []
        for report in reports:
            rows = report.rows
            out.append((report.worker, len(rows),
                        rows[0] if rows else '',
                        rows[-1] if rows else '',
                        '%.3f' % report.duration))
        return (('worker', 'rows', 'first', 'last', 'seconds'), out)


def main(argv=sys.argv[1:], app=CLIApp):
    return app().run(argv)
