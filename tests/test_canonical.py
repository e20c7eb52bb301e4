import numpy as np
import pytest

import disjoint_registry as dr


class TestCanonicalJson:
    @staticmethod
    def test_dict_key_order_ignored():
        a = {'x': 1, 'y': {'b': [1, 2], 'a': None}}
        b = {'y': {'a': None, 'b': [1, 2]}, 'x': 1}

        assert dr.canonical_json(a) == dr.canonical_json(b)
        assert dr.canonical_json(a) == '{"x":1,"y":{"a":null,"b":[1,2]}}'

    @staticmethod
    def test_distinct_values_differ():
        keys = {dr.canonical_json(v) for v in [1, '1', 1.5, [1], {'1': 1}, None, True]}
        assert len(keys) == 7

    @staticmethod
    def test_sequences():
        assert dr.canonical_json((1, 2)) == dr.canonical_json([1, 2])
        assert dr.canonical_json([2, 1]) != dr.canonical_json([1, 2])

    @staticmethod
    def test_numpy_values():
        arr = np.arange(6).reshape(2, 3)

        assert dr.canonical_json(arr) == '[[0,1,2],[3,4,5]]'
        assert dr.canonical_json(np.int64(3)) == '3'
        assert dr.canonical_json(np.float64(0.5)) == '0.5'
        assert dr.canonical_json(np.bool_(True)) == 'true'
        assert dr.canonical_json({'a': np.array([1, 2])}) == '{"a":[1,2]}'

    @staticmethod
    def test_sets():
        assert dr.canonical_json({3, 1, 2}) == '[1,2,3]'
        assert dr.canonical_json(frozenset(['b', 'a'])) == '["a","b"]'
        assert dr.canonical_json({(1, 2), (0, 5)}) == '[[0,5],[1,2]]'

    @staticmethod
    def test_errors():
        circular = []
        circular.append(circular)

        with pytest.raises(TypeError):
            dr.canonical_json(object())

        with pytest.raises(TypeError):
            dr.canonical_json([1, {'a': object()}])

        with pytest.raises(TypeError):
            dr.canonical_json(circular)

        with pytest.raises(TypeError):
            dr.canonical_json({1: 'a', 'b': 2})

    @staticmethod
    def test_deeply_nested():
        nested = []
        for _ in range(100000):
            nested = [nested]

        with pytest.raises(TypeError):
            dr.canonical_json(nested)

        uf = dr.UnionFind(2, items=['A'])

        with pytest.raises(TypeError):
            uf.register(nested)

        with pytest.raises(dr.Unregistered):
            uf.union('A', nested)

        assert nested not in uf
        assert len(uf) == 1

    @staticmethod
    def test_registry_uses_canonical_json():
        uf = dr.UnionFind(2)
        uf.register(np.array([1, 2, 3]))

        assert [1, 2, 3] in uf
        assert (1, 2, 3) in uf
        assert [3, 2, 1] not in uf
