import operator

default_less = operator.lt

def less_by_key(keyfunc, less=default_less):
    """Returns a comparator that orders values by keyfunc(value)

    keyfunc:    maps a stored value to the value that is compared
    less:       strict order applied to the derived values

    """
    def key_less(a, b):
        return less(keyfunc(a), keyfunc(b))
    return key_less

def reversed_less(less=default_less):
    """Returns the reverse of the strict order less"""
    def rev_less(a, b):
        return less(b, a)
    return rev_less

def equivalent(less, a, b):
    return not less(a, b) and not less(b, a)
