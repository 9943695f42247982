from collections import Counter
import suite
from dgen import from_schema
from mutseqs import M, empty, insert_sort, get_median, EmptyInputError, ConsumedSequenceError

# --- setup ---
case = suite.case
assert_that = suite.assert_that
check_raises = suite.check_raises


def ascending(x, y):
    return x < y


def descending(x, y):
    return x > y


# --- insert_sort ---

@case("insert_sort sorts in place with a comparator")
def test_insert_sort_comparator():
    data = [5, 2, 9, 1, 5, 6]
    returned = insert_sort(data, ascending)
    assert_that(returned is data, "insert_sort should sort the given list and return it")
    assert_that(data == [1, 2, 5, 5, 6, 9], f"got {data}")

    insert_sort(data, descending)
    assert_that(data == [9, 6, 5, 5, 2, 1], f"descending comparator should reverse order, got {data}")


@case("insert_sort without comparator uses natural ordering")
def test_insert_sort_natural():
    words = ['pear', 'apple', 'fig', 'banana']
    assert_that(insert_sort(words) == ['apple', 'banana', 'fig', 'pear'], f"got {words}")


@case("insert_sort is stable for elements that compare equal")
def test_insert_sort_stability():
    data = [(2, 'a'), (1, 'b'), (2, 'c'), (1, 'd'), (0, 'e'), (2, 'f')]
    insert_sort(data, lambda x, y: x[0] < y[0])
    assert_that(data == [(0, 'e'), (1, 'b'), (1, 'd'), (2, 'a'), (2, 'c'), (2, 'f')], f"got {data}")


@case("insert_sort output is ordered and a permutation of the input")
def test_insert_sort_properties():
    schema = {'value': ('pyint', {'min_value': -50, 'max_value': 50})}
    data = [r['value'] for r in from_schema(schema, seed=3).take(40)]
    original = list(data)
    insert_sort(data, ascending)
    assert_that(all(a <= b for a, b in zip(data, data[1:])), "output should be non-decreasing")
    assert_that(Counter(data) == Counter(original), "output should be a permutation of the input")


@case("insert_sort handles edge cases")
def test_insert_sort_edges():
    assert_that(insert_sort([]) == [], "empty list stays empty")
    assert_that(insert_sort([42]) == [42], "single element is unchanged")


# --- get_median ---

@case("get_median picks the middle element for odd lengths")
def test_median_odd():
    assert_that(get_median([3, 1, 2], ascending) == 2, "median of [3, 1, 2] is 2")


@case("get_median picks the upper middle for even lengths without averaging")
def test_median_even():
    assert_that(get_median([1, 2, 3, 4], ascending) == 3, "median of [1, 2, 3, 4] is 3")
    assert_that(get_median([4, 3, 2, 1], descending) == 2, "descending order picks the upper index of the reversed sort")


@case("get_median consumes its input")
def test_median_consumes():
    data = [9, 7, 8]
    assert_that(get_median(data) == 8, "natural ordering median")
    assert_that(data == [], "input should be emptied")


@case("get_median on an empty sequence raises")
def test_median_empty():
    error = check_raises(EmptyInputError, get_median, [], ascending)
    assert_that(isinstance(error, ValueError), "EmptyInputError should also be a ValueError")


# --- accessor ---

@case("sort.insert sorts the owned data and returns the same sequence")
def test_accessor_insert():
    seq = M([3, 1, 2])
    assert_that(seq.sort.insert() is seq, "sort.insert should return the sequence itself")
    assert_that(seq.to.list() == [1, 2, 3], "data should be sorted")


@case("sort.median consumes the sequence")
def test_accessor_median():
    seq = M([10, 40, 20, 30])
    assert_that(seq.sort.median(ascending) == 30, "upper middle of four")
    check_raises(ConsumedSequenceError, seq.sort.median)
    check_raises(EmptyInputError, empty().sort.median)


# --- run the suite ---
if __name__ == "__main__":
    suite.main(title="mutseqs sorting test")
