import importlib


def resolve(spec):
    """
    Turn a dotted name like 'mandelq.threads.AsyncManager' (or
    'mandelq.threads:AsyncManager') into the object it names.

    Anything that is not a string is assumed to be resolved already.
    """
    if not isinstance(spec, str):
        return spec

    if ':' in spec:
        modname, attrs = spec.split(':', 1)
        attrs = attrs.split('.')
    else:
        parts = spec.split('.')
        attrs = []
        while parts:
            modname = '.'.join(parts)
            try:
                importlib.import_module(modname)
                break
            except ModuleNotFoundError as e:
                # a missing import inside the module is a real failure
                if not (modname == e.name or modname.startswith('%s.' % e.name)):
                    raise
                attrs.insert(0, parts.pop())
        if not parts:
            raise ImportError("Unable to resolve %s" % spec)
        modname = '.'.join(parts)

    obj = importlib.import_module(modname)
    for attr in attrs:
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            raise ImportError("%s has no attribute %s" % (obj.__name__, attr))
    return obj
