from __future__ import annotations
import io
import unittest
from unittest.mock import patch

import stak_lang


class CatalogTests(unittest.TestCase):
    def setUp(self) -> None:
        self.registry = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("")))

    def _run(self, mnemonic: str, stack: list[int]) -> list[int]:
        return self.registry[mnemonic].apply(stack)

    def test_catalog_contents_and_contracts(self) -> None:
        expected = {
            "+": (2, 1, True),
            "-": (2, 1, True),
            "*": (2, 1, True),
            "/": (2, 1, True),
            "%": (2, 1, True),
            "abs": (1, 1, True),
            "input": (0, 1, False),
            "dup": (1, 2, True),
        }
        self.assertEqual(set(self.registry), set(expected))
        for name, (args, res, pure) in expected.items():
            prim = self.registry[name]
            self.assertEqual(prim.mnemonic, name)
            self.assertEqual((prim.arguments, prim.results, prim.is_pure()), (args, res, pure))

    def test_arithmetic(self) -> None:
        self.assertEqual(self._run("+", [2, 3]), [5])
        self.assertEqual(self._run("-", [2, 3]), [-1])
        self.assertEqual(self._run("*", [-4, 3]), [-12])
        self.assertEqual(self._run("abs", [-9]), [9])
        self.assertEqual(self._run("abs", [9]), [9])
        self.assertEqual(self._run("dup", [1, 7]), [1, 7, 7])

    def test_division_truncates_toward_zero(self) -> None:
        self.assertEqual(self._run("/", [7, 2]), [3])
        self.assertEqual(self._run("/", [-7, 2]), [-3])
        self.assertEqual(self._run("/", [7, -2]), [-3])
        self.assertEqual(self._run("/", [-7, -2]), [3])

    def test_remainder_takes_dividend_sign(self) -> None:
        self.assertEqual(self._run("%", [7, 3]), [1])
        self.assertEqual(self._run("%", [-7, 3]), [-1])
        self.assertEqual(self._run("%", [7, -3]), [1])
        self.assertEqual(self._run("%", [-7, -3]), [-1])

    def test_division_by_zero(self) -> None:
        for op in ("/", "%"):
            with self.subTest(op=op):
                with self.assertRaises(stak_lang.DivisionByZero):
                    self._run(op, [1, 0])

    def test_underflow(self) -> None:
        with self.assertRaises(stak_lang.StackUnderflow):
            self._run("dup", [])
        with self.assertRaises(stak_lang.StackUnderflow):
            self._run("%", [3])

    def test_registry_is_read_only(self) -> None:
        with self.assertRaises(TypeError):
            self.registry["neg"] = self.registry["abs"]  # type: ignore[index]
        self.assertNotIn("neg", self.registry)
        self.assertEqual(len(self.registry), 8)

    def test_default_registry_shared_instances(self) -> None:
        a = stak_lang.compile_program("+")
        b = stak_lang.compile_program("1 +")
        self.assertIs(a.children[0], b.children[1])
        self.assertIs(a.children[0], stak_lang.DEFAULT_REGISTRY["+"])


class InputSourceTests(unittest.TestCase):
    def test_input_reads_tokens_across_lines(self) -> None:
        registry = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("4  -2\n\n+7\n")))
        prog = stak_lang.compile_program("input input input", registry)
        self.assertFalse(prog.is_pure())
        self.assertEqual(prog.arity, (0, 3))
        self.assertEqual(prog.apply([]), [4, -2, 7])

    def test_exhausted_input(self) -> None:
        registry = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("1")))
        prog = stak_lang.compile_program("input input", registry)
        with self.assertRaises(stak_lang.MalformedInput) as ctx:
            prog.apply([])
        self.assertIn("exhausted", str(ctx.exception))

    def test_unparsable_input(self) -> None:
        registry = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("12x")))
        with self.assertRaises(stak_lang.MalformedInput):
            registry["input"].apply([])

    def test_oversized_input_is_malformed(self) -> None:
        registry = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("9" * 5000)))
        with self.assertRaises(stak_lang.MalformedInput) as ctx:
            registry["input"].apply([])
        self.assertIn("too large", str(ctx.exception))

    def test_independent_sources(self) -> None:
        left = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("1 2")))
        right = stak_lang.standard_registry(stak_lang.StreamInput(io.StringIO("10 20")))
        prog_l = stak_lang.compile_program("input input +", left)
        prog_r = stak_lang.compile_program("input input +", right)
        self.assertEqual(prog_r.apply([]), [30])
        self.assertEqual(prog_l.apply([]), [3])

    def test_console_input_reads_current_stdin(self) -> None:
        source = stak_lang.ConsoleInput()
        with patch("sys.stdin", io.StringIO("42")):
            self.assertEqual(source.read_int(), 42)


if __name__ == "__main__":
    unittest.main(verbosity=2)
