import numbers

SUPERSCRIPT_DIGITS = '⁰¹²³⁴⁵⁶⁷⁸⁹'
SUBSCRIPT_DIGITS = '₀₁₂₃₄₅₆₇₈₉'

SUPERSCRIPT_MINUS = '⁻'
SUBSCRIPT_MINUS = '₋'


def as_integer(v):
    '''Convert a python or numpy integer to a python int.'''
    if isinstance(v, bool) or not isinstance(v, numbers.Integral):
        raise TypeError('Cannot render %s as an index' % type(v))
    # Widen before negating so that e.g. int64 min does not wrap
    return int(v)


def decimal_digits(v):
    '''Return the decimal digits of a non-negative integer, most
    significant first.'''
    if v < 0:
        raise ValueError('Cannot split negative %d into digits' % v)
    if v == 0:
        return [0]
    digits = []
    while v > 0:
        v, digit = divmod(v, 10)
        digits.append(digit)
    digits.reverse()
    return digits


def render(v, glyphs, minus):
    v = as_integer(v)
    chars = []
    if v < 0:
        chars.append(minus)
        v = -v
    for digit in decimal_digits(v):
        chars.append(glyphs[digit])
    return ''.join(chars)


def to_superscript(v):
    '''Construct a unicode string containing v as superscript characters.'''
    return render(v, SUPERSCRIPT_DIGITS, SUPERSCRIPT_MINUS)


def to_subscript(v):
    '''Construct a unicode string containing v as subscript characters.'''
    return render(v, SUBSCRIPT_DIGITS, SUBSCRIPT_MINUS)


superscript = to_superscript
subscript = to_subscript


class Script(object):
    '''An integer that renders as raised or lowered digits when
    formatted. Subclasses choose the rendering function.'''
    _renderer = None

    def __init__(self, value):
        if type(self)._renderer is None:
            raise TypeError('%s has no renderer, use Superscript or Subscript' % type(self).__name__)
        self._value = as_integer(value)

    @property
    def value(self):
        return self._value

    def __str__(self):
        return type(self)._renderer(self._value)

    def __format__(self, spec):
        return format(str(self), spec)

    def __eq__(self, rhs):
        return type(self) is type(rhs) and self._value == rhs._value

    def __ne__(self, rhs):
        return not (self == rhs)

    def __hash__(self):
        return hash((type(self).__name__, self._value))

    def __repr__(self):
        return '%s(%d)' % (self.__class__.__name__, self._value)


class Superscript(Script):
    '''Renders its value as superscript digits, e.g. Ship¹².'''
    _renderer = staticmethod(to_superscript)


class Subscript(Script):
    '''Renders its value as subscript digits, e.g. Docking-Bay₈₄₀.'''
    _renderer = staticmethod(to_subscript)
