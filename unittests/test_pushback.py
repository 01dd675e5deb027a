#!/usr/bin/env python

import random
import unittest

from streamhelpers import CountingInputStream, CountingReader

from wrapio import (
    BufferFullError,
    ByteArrayInputStream,
    CharBuffer,
    IllegalStateError,
    InvalidArgumentError,
    NullReader,
    PushbackInputStream,
    PushbackReader,
    StringReader,
    UnsupportedOperationError,
    config_context,
)


class BaseTest(unittest.TestCase):
    def assert_reads(self, stream, expected):
        for unit in expected:
            self.assertEqual(stream.read(), unit)


class TestPushbackInputStream(BaseTest):
    def setUp(self):
        self.stream = PushbackInputStream(ByteArrayInputStream(b"abcdef"), 4)

    def test_read_without_pushback(self):
        self.assert_reads(self.stream, b"abcdef")
        self.assertIsNone(self.stream.read())

    def test_unread_one_is_read_next(self):
        first = self.stream.read()
        self.stream.unread(first)
        self.assert_reads(self.stream, b"ab")

    def test_single_unreads_come_back_last_in_first_out(self):
        self.stream.unread(ord("x"))
        self.stream.unread(ord("y"))
        self.assert_reads(self.stream, b"yxa")

    def test_bulk_unread_keeps_order(self):
        self.stream.unread(b"xyz")
        buffer = bytearray(5)
        self.assertEqual(self.stream.read_into(buffer), 5)
        self.assertEqual(bytes(buffer), b"xyzab")

    def test_bulk_unread_slice(self):
        self.stream.unread(b"0123456", 2, 3)
        self.assert_reads(self.stream, b"234a")

    def test_unread_masks_to_unsigned_bytes(self):
        self.stream.unread(-1)
        self.assertEqual(self.stream.read(), 255)
        self.stream.unread(0x1FF)
        self.assertEqual(self.stream.read(), 255)
        self.stream.unread([256, 257])
        self.assert_reads(self.stream, [0, 1])

    def test_unread_fills_buffer_exactly(self):
        self.stream.unread(b"wxyz")
        self.assertEqual(self.stream.buffered(), 4)
        with self.assertRaises(BufferFullError):
            self.stream.unread(1)
        self.assert_reads(self.stream, b"wxyza")

    def test_bulk_unread_over_capacity_is_all_or_nothing(self):
        self.stream.unread(b"xy")
        with self.assertRaises(BufferFullError):
            self.stream.unread(b"abc")
        self.assertEqual(self.stream.buffered(), 2)
        self.assert_reads(self.stream, b"xya")

    def test_read_into_tops_up_from_delegate(self):
        stream = PushbackInputStream(ByteArrayInputStream(b"a"), 4)
        stream.unread(b"xy")
        buffer = bytearray(10)
        self.assertEqual(stream.read_into(buffer), 3)
        self.assertEqual(bytes(buffer[:3]), b"xya")
        self.assertIsNone(stream.read_into(buffer))

    def test_read_into_keeps_served_units_at_end_of_data(self):
        stream = PushbackInputStream(ByteArrayInputStream(b""), 2)
        stream.unread(ord("q"))
        buffer = bytearray(4)
        self.assertEqual(stream.read_into(buffer, 1, 3), 1)
        self.assertEqual(buffer[1], ord("q"))

    def test_read_into_served_from_buffer_only(self):
        self.stream.unread(b"xyz")
        buffer = bytearray(2)
        self.assertEqual(self.stream.read_into(buffer), 2)
        self.assertEqual(bytes(buffer), b"xy")
        self.assert_reads(self.stream, b"za")

    def test_read_into_memoryview(self):
        self.stream.unread(b"x")
        buffer = bytearray(4)
        self.assertEqual(self.stream.read_into(memoryview(buffer), 1, 3), 3)
        self.assertEqual(bytes(buffer), b"\x00xab")

    def test_zero_length_operations(self):
        self.assertEqual(self.stream.read_into(bytearray(0)), 0)
        self.assertEqual(self.stream.read_into(bytearray(3), 3), 0)
        self.stream.unread(b"")
        self.assertEqual(self.stream.buffered(), 0)

    def test_invalid_arguments(self):
        with self.assertRaises(InvalidArgumentError):
            self.stream.unread(None)
        with self.assertRaises(InvalidArgumentError):
            self.stream.unread(b"ab", -1)
        with self.assertRaises(InvalidArgumentError):
            self.stream.unread(b"ab", 1, 2)
        with self.assertRaises(InvalidArgumentError):
            self.stream.read_into(None)
        with self.assertRaises(InvalidArgumentError):
            self.stream.read_into(bytearray(2), 0, 3)
        with self.assertRaises(InvalidArgumentError):
            self.stream.read_into(bytearray(2), 0, -1)
        self.assertEqual(self.stream.buffered(), 0)

    def test_skip_drains_buffer_then_delegate(self):
        self.stream.unread(b"xy")
        self.assertEqual(self.stream.skip(3), 3)
        self.assert_reads(self.stream, b"b")

    def test_skip_within_buffer(self):
        self.stream.unread(b"xyz")
        self.assertEqual(self.stream.skip(2), 2)
        self.assert_reads(self.stream, b"za")

    def test_skip_non_positive(self):
        self.stream.unread(b"x")
        self.assertEqual(self.stream.skip(0), 0)
        self.assertEqual(self.stream.skip(-5), 0)
        self.assertEqual(self.stream.buffered(), 1)

    def test_skip_past_end(self):
        self.stream.unread(b"x")
        self.assertEqual(self.stream.skip(100), 7)
        self.assertIsNone(self.stream.read())

    def test_available_counts_buffer_and_delegate(self):
        self.assertEqual(self.stream.available(), 6)
        self.stream.unread(b"xy")
        self.assertEqual(self.stream.available(), 8)

    def test_mark_reset_not_supported(self):
        self.assertFalse(self.stream.mark_supported())
        with self.assertRaises(UnsupportedOperationError):
            self.stream.mark(10)
        with self.assertRaises(UnsupportedOperationError):
            self.stream.reset()

    def test_constructor_checks(self):
        with self.assertRaises(InvalidArgumentError):
            PushbackInputStream(ByteArrayInputStream(b""), 0)
        with self.assertRaises(InvalidArgumentError):
            PushbackInputStream(ByteArrayInputStream(b""), -3)
        with self.assertRaises(InvalidArgumentError):
            PushbackInputStream(None, 1)

    def test_close_is_idempotent(self):
        delegate = CountingInputStream(b"abc")
        stream = PushbackInputStream(delegate, 1)
        stream.close()
        stream.close()
        self.assertEqual(delegate.close_count, 1)
        self.assertTrue(stream.closed)

    def test_operations_after_close(self):
        self.stream.close()
        for operation in (
            lambda: self.stream.read(),
            lambda: self.stream.read_into(bytearray(1)),
            lambda: self.stream.unread(1),
            lambda: self.stream.unread(b"a"),
            lambda: self.stream.skip(1),
            lambda: self.stream.available(),
        ):
            with self.assertRaises(IllegalStateError):
                operation()

    def test_context_manager_closes(self):
        delegate = CountingInputStream(b"abc")
        with PushbackInputStream(delegate, 1) as stream:
            self.assertEqual(stream.read(), ord("a"))
        self.assertEqual(delegate.close_count, 1)

    def test_interleaved_operations_match_model(self):
        """
        Random reads and push backs behave like prepending to a list.
        """
        rng = random.Random(1234)
        data = bytes(range(200))
        stream = PushbackInputStream(ByteArrayInputStream(data), 8)
        model = list(data)
        for _ in range(2000):
            op = rng.choice(("read", "read_into", "unread", "unread_many", "skip"))
            free = stream.capacity - stream.buffered()
            if op == "read":
                expected = model.pop(0) if model else None
                self.assertEqual(stream.read(), expected)
            elif op == "read_into":
                size = rng.randint(1, 6)
                buffer = bytearray(size)
                expected = model[:size]
                del model[:size]
                count = stream.read_into(buffer)
                if expected:
                    self.assertEqual(count, len(expected))
                    self.assertEqual(list(buffer[:count]), expected)
                else:
                    self.assertIsNone(count)
            elif op == "unread":
                if free:
                    unit = rng.randrange(256)
                    stream.unread(unit)
                    model.insert(0, unit)
            elif op == "unread_many":
                chunk = bytes(rng.randrange(256) for _ in range(rng.randint(0, free)))
                stream.unread(chunk)
                model[0:0] = list(chunk)
            else:
                count = rng.randint(0, 5)
                expected = min(count, len(model))
                self.assertEqual(stream.skip(count), expected)
                del model[:expected]


class TestPushbackReader(BaseTest):
    def setUp(self):
        self.reader = PushbackReader(StringReader("hello"), 4)

    def test_default_size_is_one(self):
        reader = PushbackReader(StringReader("abc"))
        self.assertEqual(reader.capacity, 1)
        reader.unread("z")
        with self.assertRaises(BufferFullError):
            reader.unread("y")
        self.assert_reads(reader, "zab")

    def test_default_size_follows_config(self):
        with config_context("reader_pushback_size", 3):
            reader = PushbackReader(StringReader(""))
        self.assertEqual(reader.capacity, 3)

    def test_unread_one_character(self):
        self.assertEqual(self.reader.read(), "h")
        self.reader.unread("h")
        self.assert_reads(self.reader, "hello")
        self.assertIsNone(self.reader.read())

    def test_single_unreads_come_back_last_in_first_out(self):
        self.reader.unread("1")
        self.reader.unread("2")
        self.assert_reads(self.reader, "21h")

    def test_unread_string_keeps_order(self):
        self.reader.unread("abc")
        buffer = [""] * 6
        self.assertEqual(self.reader.read_into(buffer), 6)
        self.assertEqual("".join(buffer), "abchel")

    def test_unread_list_slice(self):
        self.reader.unread(list("0123"), 1, 2)
        self.assert_reads(self.reader, "12h")

    def test_characters_are_not_masked(self):
        self.reader.unread("€")
        self.assertEqual(self.reader.read(), "€")

    def test_unread_over_capacity_is_all_or_nothing(self):
        self.reader.unread("ab")
        with self.assertRaises(BufferFullError):
            self.reader.unread("xyz")
        self.assertEqual(self.reader.buffered(), 2)
        self.assert_reads(self.reader, "abh")

    def test_skip(self):
        self.reader.unread("ab")
        self.assertEqual(self.reader.skip(4), 4)
        self.assert_reads(self.reader, "llo")

    def test_ready(self):
        reader = PushbackReader(NullReader.get_instance(), 2)
        self.assertFalse(reader.ready())
        reader.unread("x")
        self.assertTrue(reader.ready())

    def test_read_buffer_uses_backing_array(self):
        self.reader.unread("XY")
        target = CharBuffer.allocate(5)
        self.assertEqual(self.reader.read_buffer(target), 5)
        self.assertEqual(target.position, 5)
        self.assertEqual(str(target.flip()), "XYhel")

    def test_read_buffer_without_backing_array(self):
        self.reader.unread("X")
        target = CharBuffer.allocate_direct(3)
        self.assertEqual(self.reader.read_buffer(target), 3)
        self.assertEqual(str(target.flip()), "Xhe")

    def test_read_buffer_full_target(self):
        target = CharBuffer.allocate(2)
        target.position = 2
        self.assertEqual(self.reader.read_buffer(target), 0)

    def test_read_buffer_at_end_of_data(self):
        reader = PushbackReader(StringReader(""), 1)
        self.assertIsNone(reader.read_buffer(CharBuffer.allocate(3)))

    def test_unread_buffer_from_array(self):
        source = CharBuffer.wrap(list("abcd"), 1, 3)
        self.reader.unread_buffer(source)
        self.assertEqual(source.position, 3)
        self.assert_reads(self.reader, "bch")

    def test_unread_buffer_from_read_only_view(self):
        source = CharBuffer.wrap("xyz")
        self.assertFalse(source.has_array())
        self.reader.unread_buffer(source)
        self.assertEqual(source.remaining(), 0)
        self.assert_reads(self.reader, "xyzh")

    def test_unread_buffer_over_capacity(self):
        source = CharBuffer.wrap("abcde")
        with self.assertRaises(BufferFullError):
            self.reader.unread_buffer(source)
        self.assertEqual(source.position, 0)
        self.assertEqual(self.reader.buffered(), 0)

    def test_unread_empty_buffer(self):
        self.reader.unread_buffer(CharBuffer.allocate(0))
        self.assertEqual(self.reader.buffered(), 0)
        with self.assertRaises(InvalidArgumentError):
            self.reader.unread_buffer(None)

    def test_mark_reset_not_supported(self):
        self.assertFalse(self.reader.mark_supported())
        with self.assertRaises(UnsupportedOperationError):
            self.reader.mark(1)
        with self.assertRaises(UnsupportedOperationError):
            self.reader.reset()

    def test_constructor_checks(self):
        with self.assertRaises(InvalidArgumentError):
            PushbackReader(StringReader(""), 0)
        with self.assertRaises(InvalidArgumentError):
            PushbackReader(None)

    def test_close_is_idempotent(self):
        delegate = CountingReader("abc")
        reader = PushbackReader(delegate)
        reader.close()
        reader.close()
        self.assertEqual(delegate.close_count, 1)

    def test_operations_after_close(self):
        self.reader.close()
        for operation in (
            lambda: self.reader.read(),
            lambda: self.reader.read_into([""]),
            lambda: self.reader.read_buffer(CharBuffer.allocate(1)),
            lambda: self.reader.unread("a"),
            lambda: self.reader.unread_buffer(CharBuffer.wrap("a")),
            lambda: self.reader.skip(1),
            lambda: self.reader.ready(),
        ):
            with self.assertRaises(IllegalStateError):
                operation()


if __name__ == "__main__":
    unittest.main()
