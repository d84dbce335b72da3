import pytest


def test_settings_decorator():
    from mandelq.service import Setting

    @Setting.initialize_all
    class Hoopty(object):
        monkey = Setting(default=0, help='help')

    settings = getattr(Hoopty, '_defaults', None)
    assert settings.monkey
    assert settings.monkey.default == 0
    assert settings.monkey.help == 'help'
    assert settings.to_dict() == {'monkey': 0}


def test_settings_inherited():
    from mandelq.service import Service
    from mandelq.service import Setting

    @Setting.initialize_all
    class Base(Service):
        monkey = Setting(default=1)

    @Setting.initialize_all
    class Child(Base):
        wrench = Setting(default=2)

    assert set(Child._defaults) == {'monkey', 'wrench'}
    assert Child().monkey == 1


def test_service_config():
    from ..render import Renderer
    assert 'max_iter' in Renderer._defaults
    assert Renderer._defaults['max_bound'].default == 1000000


def test_config_coerced():
    from ..render import Renderer
    renderer = Renderer(dict(width='8', max_iter='50', span_real='1.5', extra='kept'))
    assert renderer.width == 8
    assert renderer.max_iter == 50
    assert renderer.span_real == 1.5
    assert renderer.config['extra'] == 'kept'


def test_setting_read_only():
    from ..render import Renderer
    renderer = Renderer()
    with pytest.raises(ValueError):
        renderer.width = 10


def test_setting_unknown_attr():
    from ..render import Renderer
    with pytest.raises(AttributeError):
        Renderer._defaults.nope
