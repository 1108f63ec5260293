import suite
from dgen import from_schema
from instrumented import CountingSource
from lazyq import Q, QueryOptions

test = suite.test
assert_that = suite.assert_that
assert_equal = suite.assert_equal

customer_schema = {
    'id': ('pyint', {'min_value': 1, 'max_value': 6}),
    'name': 'first_name'
}

order_schema = {
    'customer_id': ('pyint', {'min_value': 1, 'max_value': 8}),
    'amount': ('pyint', {'min_value': 100, 'max_value': 1000})
}

outer = [{'id': 1, 'name': 'a'}, {'id': 2, 'name': 'b'}]
inner = [{'id': 1, 'tag': 'x'}, {'id': 1, 'tag': 'y'}, {'id': 3, 'tag': 'z'}]

people_data = [
    {'id': 1, 'name': 'alice', 'dept': 'eng'},
    {'id': 2, 'name': 'bob', 'dept': 'sales'},
    {'id': 3, 'name': 'charlie', 'dept': 'eng'}
]

orders_data = [
    {'id': 101, 'customer_id': 1, 'amount': 250},
    {'id': 102, 'customer_id': 3, 'amount': 150},
    {'id': 103, 'customer_id': 1, 'amount': 500},
    {'id': 104, 'customer_id': 4, 'amount': 300}  # no matching person
]


def _pairs(options=None):
    return Q(outer, options).join.join(
        inner, lambda o: o['id'], lambda i: i['id'], lambda o, i: (o['name'], i['tag'])).to.list()


@test("join matches on equal keys")
def test_join_basic():
    assert_equal(_pairs(), [("a", "x"), ("a", "y")])


@test("nested strategy gives the same result")
def test_join_nested_strategy():
    assert_equal(_pairs(QueryOptions(join_strategy='nested')), [("a", "x"), ("a", "y")])


@test("join groups by outer order, inner order within a group")
def test_join_ordering():
    result = Q(people_data).join.join(
        orders_data, lambda p: p['id'], lambda o: o['customer_id'],
        lambda p, o: (p['name'], o['id'])).to.list()
    assert_equal(result, [('alice', 101), ('alice', 103), ('charlie', 102)])


@test("join with no matches is empty")
def test_join_no_matches():
    result = Q([{'id': 1}]).join.join([{'customer_id': 2}], lambda x: x['id'],
                                      lambda x: x['customer_id'], lambda a, b: (a, b)).to.list()
    assert_equal(result, [])


@test("join is deferred")
def test_join_deferred():
    outer_source = CountingSource(outer)
    inner_source = CountingSource(inner)
    joined = Q(outer_source).join.join(inner_source, lambda o: o['id'], lambda i: i['id'], lambda o, i: i)
    assert_equal(outer_source.reads + inner_source.reads, 0)
    assert_equal(joined.to.count(), 2)


@test("unhashable keys fall back to a nested scan")
def test_join_unhashable_keys():
    left = [{'k': [1, 2], 'v': 'a'}, {'k': [3], 'v': 'b'}]
    right = [{'k': [3], 'w': 'x'}, {'k': [1, 2], 'w': 'y'}, {'k': [3], 'w': 'z'}]
    result = Q(left).join.join(right, lambda l: l['k'], lambda r: r['k'], lambda l, r: l['v'] + r['w']).to.list()
    assert_equal(result, ['ay', 'bx', 'bz'])


@test("a key that is not equal to itself never matches, under either strategy")
def test_join_nan_key():
    nan = float('nan')
    left = [(nan, 'a'), (1.0, 'b')]
    right = [(nan, 'x'), (1.0, 'y')]
    for strategy in ('hash', 'nested'):
        result = Q(left, QueryOptions(join_strategy=strategy)).join.join(
            right, lambda l: l[0], lambda r: r[0], lambda l, r: (l[1], r[1])).to.list()
        assert_equal(result, [('b', 'y')], f"{strategy} join")
    grouped = Q(left).join.group_join(right, lambda l: l[0], lambda r: r[0], lambda l, rs: (l[1], len(rs))).to.list()
    assert_equal(grouped, [('a', 0), ('b', 1)])


@test("strategies agree on generated data")
def test_join_strategies_agree():
    customers = from_schema(customer_schema, seed=21).take(10)
    orders = from_schema(order_schema, seed=22).take(40)
    select_pair = lambda c, o: (c['name'], o['amount'])
    hashed = customers.join.join(orders, lambda c: c['id'], lambda o: o['customer_id'], select_pair).to.list()
    nested = customers.with_options(join_strategy='nested').join.join(
        orders, lambda c: c['id'], lambda o: o['customer_id'], select_pair).to.list()
    assert_equal(hashed, nested)
    expected = [(c['name'], o['amount']) for c in customers for o in orders if c['id'] == o['customer_id']]
    assert_equal(hashed, expected)


@test("left_join keeps unmatched outer elements")
def test_left_join():
    result = Q(people_data).join.left_join(
        orders_data, lambda p: p['id'], lambda o: o['customer_id'],
        lambda p, o: (p['name'], o['id'] if o else None)).to.list()
    assert_equal(result, [('alice', 101), ('alice', 103), ('bob', None), ('charlie', 102)])


@test("group_join yields one result per outer element")
def test_group_join():
    result = Q(people_data).join.group_join(
        orders_data, lambda p: p['id'], lambda o: o['customer_id'],
        lambda p, orders: (p['name'], [o['amount'] for o in orders])).to.list()
    assert_equal(result, [('alice', [250, 500]), ('bob', []), ('charlie', [150])])


if __name__ == "__main__":
    suite.run(title="lazyq join test suite")
