"""Tests for the command-line driver."""

import os
import sys
import io
import json
import unittest
from contextlib import redirect_stdout

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from config import REPL_CONFIG
from evaluator import Computed, Empty, Failed
from grammar import EOF
from main import build_parser, main, render, repl


class TestRender(unittest.TestCase):

    def test_render(self):
        self.assertEqual(render(Computed(-3)), "-3")
        self.assertIsNone(render(Empty()))
        self.assertEqual(render(Failed("boom")), "boom")


class TestRepl(unittest.TestCase):

    def run_repl(self, lines):
        pending = list(lines)
        prompts = []
        output = []

        def read(prompt):
            prompts.append(prompt)
            if not pending:
                raise EOFError
            return pending.pop(0)

        repl("> ", "\n", read=read, write=output.append)
        return prompts, output

    def test_loop_continues_after_errors(self):
        prompts, output = self.run_repl(["1+2", "", "1/0", "4/2*5+5-3"])
        self.assertEqual(prompts, ["> "] * 5)
        self.assertEqual(output[0], "3")
        self.assertTrue(output[1].startswith("DivisionByZeroError"))
        self.assertEqual(output[2], "12")
        self.assertEqual(len(output), 3)

    def test_invalid_character_does_not_stop_loop(self):
        _, output = self.run_repl(["a", "2*3"])
        self.assertTrue(output[0].startswith("InvalidCharacterError"))
        self.assertEqual(output[1], "6")

    def test_huge_operand_does_not_stop_loop(self):
        _, output = self.run_repl(["1" * 5000, "2*3"])
        self.assertTrue(output[0].startswith("IntegerOverflowError"))
        self.assertEqual(output[1], "6")

    def test_keyboard_interrupt_ends_loop(self):
        def read(prompt):
            raise KeyboardInterrupt

        output = []
        repl("> ", "\n", read=read, write=output.append)
        self.assertEqual(output, [])


class TestMain(unittest.TestCase):

    def run_main(self, argv):
        buf = io.StringIO()
        with redirect_stdout(buf):
            status = main(argv)
        return status, buf.getvalue()

    def test_defaults(self):
        args = build_parser().parse_args([])
        self.assertEqual(args.prompt, REPL_CONFIG["prompt"])
        self.assertEqual(args.log_level, REPL_CONFIG["log_level"])
        self.assertIsNone(args.command)

    def test_command(self):
        self.assertEqual(self.run_main(["-c", "4 /2 * 5 + 5 - 3"]), (0, "12\n"))

    def test_blank_command(self):
        self.assertEqual(self.run_main(["-c", "  "]), (0, ""))

    def test_failing_command(self):
        status, out = self.run_main(["-c", "1+"])
        self.assertEqual(status, 1)
        self.assertTrue(out.startswith("ExpectedOperandError"))

    def test_tokens(self):
        status, out = self.run_main(["-c", "12+2", "--tokens"])
        self.assertEqual(status, 0)
        first, second = out.splitlines()
        # the command is terminated with the scanner's own end-of-input marker
        self.assertEqual(json.loads(first)[-1], {"kind": "EndOfInput", "image": EOF.image})
        self.assertEqual(json.loads(first)[0], {"kind": "Integer", "image": "12"})
        self.assertEqual(second, "14")

    def test_tokens_invalid_character(self):
        status, out = self.run_main(["-c", "1%2", "--tokens"])
        self.assertEqual(status, 1)
        self.assertTrue(out.startswith("InvalidCharacterError"))


if __name__ == '__main__':
    unittest.main()
