import unittest
from typing import Union

from optionpy import Some, NONE, from_nullable, InvalidArgument, IllegalState, InvalidCast


class Animal:
    pass


class Dog(Animal):
    pass


class TestMap(unittest.TestCase):
    def test_map_some(self):
        self.assertEqual(Some("Hello").map(len), Some(5))

    def test_map_identity(self):
        self.assertEqual(Some(3).map(lambda x: x), Some(3))

    def test_map_none(self):
        self.assertIs(NONE.map(lambda x: x + 1), NONE)

    def test_mapper_returning_none_collapses(self):
        self.assertIs(Some(3).map(lambda _: None), NONE)

    def test_missing_mapper(self):
        with self.assertRaises(InvalidArgument):
            Some(3).map(None)
        with self.assertRaises(InvalidArgument):
            NONE.map(None)


class TestFlatMap(unittest.TestCase):
    def test_flat_map_some(self):
        self.assertEqual(Some(2).flat_map(lambda x: Some(x * 3)), Some(6))

    def test_flat_map_to_none_is_legal(self):
        self.assertIs(Some(2).flat_map(lambda _: NONE), NONE)

    def test_flat_map_none(self):
        called = []
        self.assertIs(NONE.flat_map(lambda x: called.append(x) or Some(x)), NONE)
        self.assertEqual(called, [])

    def test_mapper_returning_no_option(self):
        with self.assertRaises(IllegalState):
            Some(2).flat_map(lambda _: None)
        with self.assertRaises(IllegalState):
            Some(2).flat_map(lambda x: x)

    def test_missing_mapper(self):
        with self.assertRaises(InvalidArgument):
            Some(2).flat_map(None)


class TestFilter(unittest.TestCase):
    def test_filter_keeps_same_instance(self):
        o = Some("Scooby")
        self.assertIs(o.filter(lambda s: s.startswith("S")), o)

    def test_filter_rejects(self):
        self.assertIs(Some("Scooby").filter(lambda s: s == "Doo"), NONE)

    def test_filter_none(self):
        self.assertIs(NONE.filter(lambda _: True), NONE)

    def test_missing_predicate(self):
        with self.assertRaises(InvalidArgument):
            Some(1).filter(None)

    def test_if_with_predicate_and_bool(self):
        o = Some(10)
        self.assertIs(o.if_(lambda x: x > 5), o)
        self.assertIs(o.if_(lambda x: x > 50), NONE)
        self.assertIs(o.if_(True), o)
        self.assertIs(o.if_(False), NONE)
        self.assertIs(NONE.if_(True), NONE)

    def test_if_missing_condition(self):
        with self.assertRaises(InvalidArgument):
            Some(1).if_(None)

    def test_if_takes_truthy_conditions(self):
        class Flag:
            def __init__(self, on):
                self.on = on

            def __bool__(self):
                return self.on

        o = Some(1)
        self.assertIs(o.if_(Flag(True)), o)
        self.assertIs(o.if_(Flag(False)), NONE)
        self.assertIs(o.if_("yes"), o)
        self.assertIs(o.if_(0), NONE)
        self.assertIs(NONE.if_(Flag(True)), NONE)


class TestIfElseAndOr(unittest.TestCase):
    def test_if_else(self):
        self.assertEqual(Some("abc").if_else(len, 0), Some(3))
        self.assertEqual(NONE.if_else(len, 0), Some(0))
        self.assertIs(NONE.if_else(len), NONE)
        self.assertIs(Some("abc").if_else(lambda _: None), NONE)

    def test_or(self):
        self.assertEqual(Some(1).or_(Some(2)), Some(1))
        self.assertEqual(NONE.or_(Some(2)), Some(2))
        self.assertIs(NONE.or_(NONE), NONE)


class TestInspection(unittest.TestCase):
    def test_if_present_some(self):
        seen = []
        self.assertIsNone(Some("Scooby").if_present(seen.append))
        self.assertEqual(seen, ["Scooby"])

    def test_do_none(self):
        seen = []
        NONE.do(seen.append)
        self.assertEqual(seen, [])

    def test_missing_action(self):
        with self.assertRaises(InvalidArgument):
            NONE.do(None)

    def test_match(self):
        self.assertEqual(from_nullable("Hello World").match(len, 0), 11)
        self.assertEqual(from_nullable(None).match(len, 0), 0)
        self.assertIsNone(NONE.match(len))

    def test_match_missing_fn(self):
        with self.assertRaises(InvalidArgument):
            Some(1).match(None, 0)


class TestCast(unittest.TestCase):
    def test_cast_to_base(self):
        d = Dog()
        self.assertEqual(Some(d).cast(Animal), Some(d))

    def test_cast_invalid(self):
        with self.assertRaises(InvalidCast) as cm:
            Some(Animal()).cast(Dog)
        self.assertEqual(str(cm.exception), "Cannot cast Animal to Dog")
        self.assertTrue(isinstance(cm.exception, TypeError))

    def test_cast_none_propagates(self):
        self.assertIs(NONE.cast(Dog), NONE)

    def test_cast_tuple_of_types(self):
        self.assertEqual(Some(1).cast((str, int)), Some(1))
        with self.assertRaises(InvalidCast) as cm:
            Some(1.5).cast((str, int))
        self.assertEqual(str(cm.exception), "Cannot cast float to str | int")

    def test_cast_union_types(self):
        self.assertEqual(Some(1).cast(int | str), Some(1))
        self.assertEqual(Some("a").cast(Union[int, str]), Some("a"))
        self.assertEqual(Some(1).safe_cast(int | str), Some(1))
        self.assertIs(Some(1.5).safe_cast(int | str), NONE)
        self.assertEqual(Some(1.5).cast((int | str, float)), Some(1.5))
        with self.assertRaises(InvalidCast) as cm:
            Some(1.5).cast(int | str)
        self.assertEqual(str(cm.exception), "Cannot cast float to int | str")

    def test_safe_cast(self):
        self.assertIs(from_nullable(Animal()).safe_cast(Dog), NONE)
        d = Dog()
        self.assertEqual(from_nullable(d).safe_cast(Dog), Some(d))
        self.assertIs(NONE.safe_cast(Dog), NONE)

    def test_cast_rejects_bad_target(self):
        with self.assertRaises(InvalidArgument):
            Some(1).cast(None)
        with self.assertRaises(InvalidArgument):
            Some(1).safe_cast("int")
