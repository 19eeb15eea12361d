import logging
import sys

from intset import IntSet, equal, load_intset_class
from intset.base.exceptions import IntSetCapacityExceeded


def show(label: str, s: IntSet):
    print(f'{label:>12}: {{', end='')
    s.dump(sys.stdout)
    print(f'}}  size={s.size()}')


if __name__ == '__main__':
    # arguments:
    # config - optional YAML/TOML file with intset.max_size
    logging.basicConfig(level=logging.DEBUG)
    cls = load_intset_class(sys.argv[1] if len(sys.argv) > 1 else None)

    a = cls.from_iterable([1, 2, 3])
    b = cls.from_iterable([3, 4])
    show('A', a)
    show('B', b)
    show('A + B', a.union_with(b))
    show('A * B', a.intersect(b))
    show('A - B', a.subtract(b))
    print(f'A subset of A+B: {a.is_subset_of(a.union_with(b))}')
    print(f'A == A + {{}}: {equal(a, a.union_with(cls()))}')

    a.remove(1)
    a.add(1)
    show('A re-added 1', a)

    full = cls.from_iterable(range(cls.MAX_SIZE))
    print(f'add to full set: {full.add(-1)}')
    try:
        full.union_with(cls.from_iterable([-1]))
    except IntSetCapacityExceeded as e:
        print(f'union failed: {e}')
