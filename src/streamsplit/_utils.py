"""Helpers live here, like:
 - options ctx manager
 - separator normalization
"""
import threading
import typing as t


class BaseCtxMeta(type):
    def __init__(cls, name, bases, kwargs):
        super().__init__(name, bases, kwargs)
        cls._ctx = threading.local()


class BaseOptionsMeta(type):
    def __init__(cls, name, bases, kwargs):
        super().__init__(name, bases, kwargs)
        cls._option_attrs = {
            k: v
            for k, v in kwargs.items()
            if not k.startswith("_") and k not in {"clone", "to_defaults"}
        }


class BaseOptions(object, metaclass=BaseOptionsMeta):
    """Container object, which carries current options"""

    def clone(self):
        clone = self.__class__()
        for option_attr in self._option_attrs.keys():
            setattr(clone, option_attr, getattr(self, option_attr))
        return clone

    def to_defaults(self, option_name=None):
        if option_name:
            setattr(self, option_name, self._option_attrs[option_name])
        else:
            for option_attr, value in self._option_attrs.items():
                setattr(self, option_attr, value)


OT = t.TypeVar("OT", bound=BaseOptions)


class BaseCtx(
    t.Generic[OT], metaclass=BaseCtxMeta
):  # pylint:disable=invalid-metaclass
    """Context manager to manage option objects.

    Every thread keeps its own stack of options, entering a context pushes a
    clone of the current options, leaving it pops them.
    """

    options_cls: t.Type[OT]
    _ctx: threading.local

    @classmethod
    def _get_stack(cls) -> "t.List[OT]":
        stack = getattr(cls._ctx, "stack", None)
        if stack is None:
            stack = cls._ctx.stack = []
        return stack

    def __enter__(self) -> OT:
        stack = self._get_stack()
        options = stack[-1].clone() if stack else self.options_cls()
        stack.append(options)
        return options

    def __exit__(self, exc_type, exc_value, tb):
        self._get_stack().pop()

    @classmethod
    def get_option_value(cls, option_name):
        stack = cls._get_stack()
        options = stack[-1] if stack else cls.options_cls
        return getattr(options, option_name)


class SplitterOptions(BaseOptions):
    """Splitter options (+ see default values below):

    * ``chunk_size = 32768`` - how many bytes to request from a source per
      read, unless passed to ``Splitter`` explicitly

    """

    chunk_size = 32768


class SplitterOptionsCtx(BaseCtx):
    """Thread-safe context to manage options.

    Example:

    .. code-block:: python

       with SplitterOptionsCtx() as options:
           options.chunk_size = 4096
           # ...

    """

    options_cls = SplitterOptions


def normalize_separator(separator) -> "t.Union[bytes, str]":
    """Returns the separator as ``bytes`` (or ``str`` for text mode).

    Raises TypeError for values which are not sequences of bytes.
    """
    if isinstance(separator, (str, bytes)):
        return separator
    if isinstance(separator, int):
        raise TypeError("separator has to be a byte sequence, not int")
    return bytes(separator)
