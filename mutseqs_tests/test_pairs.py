import math
import suite
from dgen import from_schema
from mutseqs import M, WeightedPair, make_pairs, pair_count

# --- setup ---
case = suite.case
assert_that = suite.assert_that

# --- test data & helpers ---
letters = [("a", 1), ("b", 2), ("c", 3)]


def first_field(t):
    return t[0]


def inverse_sum(x, y):
    return 1.0 / (x[1] + y[1])


@case("make_pairs emits both directions per unordered pair in documented order")
def test_make_pairs_letters():
    result = make_pairs(letters, first_field, inverse_sum)
    expected = [
        ("c", "a", 0.25), ("a", "c", 0.25),
        ("c", "b", 0.2), ("b", "c", 0.2),
        ("b", "a", 1.0 / 3), ("a", "b", 1.0 / 3),
    ]
    assert_that(result == expected, f"expected {expected}, got {result}")
    assert_that(all(isinstance(p, WeightedPair) for p in result), "entries should be WeightedPair")


@case("make_pairs does not touch its input")
def test_make_pairs_non_consuming():
    data = list(letters)
    make_pairs(data, first_field, inverse_sum)
    assert_that(data == letters, "input should be unchanged")


@case("weight is computed as weight(later, earlier)")
def test_make_pairs_argument_order():
    seen = []

    def recorder(later, earlier):
        seen.append((later[0], earlier[0]))
        return 1.0

    make_pairs(letters, first_field, recorder)
    assert_that(seen == [("c", "a"), ("c", "b"), ("b", "a")], f"got {seen}")


@case("pair count law holds for all-distinct keys, with mirrored weights")
def test_pair_count_law():
    schema = {
        'name': 'uuid4',
        'score': ('pyint', {'min_value': 1, 'max_value': 50}),
    }
    records = from_schema(schema, seed=7).take(12).to.list()
    result = make_pairs(records, lambda r: r['name'], lambda x, y: x['score'] * y['score'])
    n = len(records)
    assert_that(len(result) == n * (n - 1), f"expected {n * (n - 1)} pairs, got {len(result)}")

    lookup = {(p.item1, p.item2): p.weight for p in result}
    assert_that(len(lookup) == len(result), "every directed pair should appear once")
    for p in result:
        assert_that(lookup[(p.item2, p.item1)] == p.weight, "mirror pair should carry the same weight")


@case("equal keys produce no entries and skip the weight function")
def test_make_pairs_equal_keys():
    calls = []

    def weight(x, y):
        calls.append((x, y))
        return 2

    data = [("x", 1), ("x", 2), ("y", 3)]
    result = make_pairs(data, first_field, weight)
    assert_that(result == [("y", "x", 2.0), ("x", "y", 2.0), ("y", "x", 2.0), ("x", "y", 2.0)], f"got {result}")
    assert_that(len(calls) == 2, "weight should only be computed for distinct-key pairs")
    assert_that(all(isinstance(p.weight, float) for p in result), "weights should be floats")


@case("absent keys are skipped, not an error")
def test_make_pairs_absent_keys():
    data = [("a", 1), (None, 2), ("c", 3)]
    result = make_pairs(data, first_field, inverse_sum)
    assert_that(result == [("c", "a", 0.25), ("a", "c", 0.25)], f"got {result}")


@case("make_pairs handles edge cases")
def test_make_pairs_edges():
    assert_that(make_pairs([], first_field, inverse_sum) == [], "empty input gives no pairs")
    assert_that(make_pairs([("a", 1)], first_field, inverse_sum) == [], "a single element gives no pairs")


@case("pair_count predicts the number of entries")
def test_pair_count():
    data = [("x", 1), ("x", 2), ("y", 3), ("z", 4), (None, 5)]
    assert_that(pair_count(data, first_field) == len(make_pairs(data, first_field, inverse_sum)),
                "pair_count should agree with make_pairs")
    assert_that(pair_count(letters, first_field) == 6, "three distinct keys give 6 entries")


@case("pairs.make accessor keeps the sequence usable")
def test_accessor_make():
    seq = M(letters)
    pairs = seq.pairs.make(first_field, inverse_sum)
    assert_that(pairs.to.count() == 6, "accessor should produce all 6 pairs")
    assert_that(math.isclose(pairs.to.first().weight, 0.25), "first pair pairs the last and first elements")
    assert_that(not seq.consumed and seq.pairs.count(first_field) == 6, "source should remain usable")


# --- run the suite ---
if __name__ == "__main__":
    suite.main(title="mutseqs pairs test")
