from contextlib import contextmanager
from .resolver import resolve
from .utils import reify
import logging


class AbstractAsyncManager(object):
    """
    What a service needs from its concurrency backend
    """
    def spawn(self, func, *args, **kwargs):
        raise NotImplementedError()

    def join(self, workers):
        raise NotImplementedError()

    def lock(self, *args, **kwargs):
        raise NotImplementedError()

    def do_stop(self):
        pass


class Config(dict):
    """
    A data structure for configuration information
    """
    load = dict.update


class SettingInfo(dict):
    """
    Maps setting names to their `Setting` descriptors
    """
    def __getattr__(self, name):
        try:
            return self[name]
        except KeyError:
            raise AttributeError(name)

    def to_dict(self):
        return dict((key, value.default) for key, value in self.items())

    def coerce(self, mapping):
        """
        Run each value through the `ctor` of its setting, if it has one
        """
        out = {}
        for key, value in mapping.items():
            setting = self.get(key)
            if setting is not None and setting.ctor is not None and value is not None:
                value = setting.ctor(value)
            out[key] = value
        return out


def match_descriptors(klass, descriptor_class):
    for name, inst in klass.__dict__.items():
        if isinstance(inst, descriptor_class):
            yield name, inst


class Setting(object):
    def __init__(self, default=None, help=None, ctor=None):
        self.default = default
        self.help = help
        self.name = None
        self.ctor = ctor

    def set_name(self, name):
        self.name = name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        if self.name is None:
            raise RuntimeError("name not initialized")
        return obj.config[self.name]

    def __set__(self, obj, value):
        raise ValueError("Read only value")

    @classmethod
    def initialize_all(cls, klass, extractor=match_descriptors, info_ctor=SettingInfo,
                       attr='_defaults'):
        settings = {}
        # inherit settings declared on base services
        for base in reversed(klass.__mro__[1:]):
            settings.update(getattr(base, attr, None) or {})
        settings.update({name: setting for name, setting in extractor(klass, cls)})

        # annotate the klass
        setattr(klass, attr, info_ctor(settings))

        # set the name for each of the descriptors
        # since this is the first time we know it
        for name, setting in settings.items():
            setting.set_name(name)

        return klass


class Service(object):
    """
    A base class for services
    """
    log = logging.getLogger(__name__)
    resolve = staticmethod(resolve)
    async_handler = 'mandelq.threads.AsyncManager'
    _defaults = SettingInfo()

    def __init__(self, config=None):
        if isinstance(config, dict):
            self.config.load(self._defaults.coerce(config))
        self.state = 'init'
        self.async_manager = self.resolve(self.async_handler)()

    @reify
    def config(self):
        return Config(self._defaults.to_dict())

    def start(self):
        """
        Start this service; `do_start` does the actual work
        """
        self.state = "start"
        self.do_start()
        self.state = "ready"

    up = {'start', 'ready'}
    down = {"init", "stopped"}

    @property
    def running(self):
        return self.state in self.up

    @property
    def ready(self):
        return self.state == 'ready'

    def do_start(self):
        """Empty implementation of service start. Implement me!"""
        return

    def do_stop(self):
        """Empty implementation of service stop. Implement me!"""
        return

    def stop(self):
        if self.state in self.down:
            return
        ready_before_stop = self.ready
        self.state = "stop"
        if ready_before_stop:
            self.do_stop()
        self.state = "stopped"

    def __enter__(self):
        self.start()
        return self

    def __exit__(self, type, value, traceback):
        self.stop()


@contextmanager
def app(spec, config=None):
    service = resolve(spec)
    app = service(config=config)
    try:
        yield app
    finally:
        app.stop()
