import collections.abc
import io

import numpy as np

from unicode_rendering import to_superscript, to_subscript


def check_integer_array(x):
    '''Reject numpy arrays whose dtype cannot hold integers. Object arrays
    are checked element by element as they are rendered.'''
    if x.dtype != object and not np.issubdtype(x.dtype, np.integer):
        raise TypeError('Cannot render an array of %s as indices' % x.dtype)


def arraymap(f, x):
    '''Apply f to each integer in x, which may be a scalar, a nested
    sequence, or a numpy array. Returns an object array with the same
    shape as x, or the result of f itself if x is a scalar.'''
    if isinstance(x, np.ndarray):
        check_integer_array(x)
        if x.ndim == 0:
            return f(x[()])
        result = np.empty(x.shape, dtype=object)
        for index in np.ndindex(*x.shape):
            result[index] = f(x[index])
        return result
    if isinstance(x, (str, bytes)):
        raise TypeError('Cannot render %s as an index' % type(x))
    if not isinstance(x, collections.abc.Sequence):
        # Scalars, including anything f should reject
        return f(x)

    children = [arraymap(f, xi) for xi in x]
    shapes = set(c.shape if isinstance(c, np.ndarray) else None for c in children)
    if len(shapes) > 1:
        raise ValueError('Cannot render a ragged array')
    inner = shapes.pop() if shapes else None
    if inner is None:
        result = np.empty(len(children), dtype=object)
        result[:] = children
        return result
    result = np.empty((len(children),) + inner, dtype=object)
    for i, child in enumerate(children):
        result[i] = child
    return result


def superscript_array(x):
    return arraymap(to_superscript, x)


def subscript_array(x):
    return arraymap(to_subscript, x)


def array_str(arr, formatter=to_superscript):
    '''Lay out a 1-D or 2-D integer array as bracketed rows, padding every
    cell to the width of the widest one.'''
    strings = arraymap(formatter, arr)
    if not isinstance(strings, np.ndarray):
        raise ValueError('Cannot lay out a scalar as an array')
    if strings.ndim == 1:
        rows, nested = [strings], False
    elif strings.ndim == 2:
        rows, nested = strings, True
    else:
        raise ValueError('Cannot lay out an array with %d dimensions' % strings.ndim)
    maxlen = max([len(s) for row in rows for s in row] or [0])

    ss = io.StringIO()
    if nested:
        ss.write('[')
    for i, row in enumerate(rows):
        if i > 0:
            ss.write('\n ')
        ss.write('[')
        for j, s in enumerate(row):
            if j > 0:
                ss.write(' ')
            ss.write(s)
            ss.write(' '*(maxlen-len(s)))
        ss.write(']')
    if nested:
        ss.write(']')
    return ss.getvalue()
