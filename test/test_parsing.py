"""
Command-line parsing behavioral tests.

Scope
- Validate value assignment, defined flags and verbatim consumption of tokens.
- Validate soft failures: unknown tokens, missing values, unconvertible values.
- Validate diagnostic wording (English and French) and console reporting.

Conventions
- Test method names follow CamelCase per project convention.
- Parsers are quiet unless the test inspects console output.
"""

import io
import unittest
from decimal import Decimal
from unittest import TestCase

from rich.console import Console

from paramenu import (
    ArgumentParser,
    FaultCode,
    Locale,
    NotEnoughValuesFault,
    Registry,
    UncastableValueFault,
    UnknownParameterFault,
    ValueKind,
)


def build_registry():
    registry = Registry()
    registry.define_param("loud", "Shout.")
    registry.define_value_param("count", ["n"], [1], "Repetitions.")
    registry.define_value_param("size", ["w", "h"], [640, 480], "Image size.")
    registry.define_value_param("ratio", ["r"], [0.5], "Ratio.")
    registry.define_value_param("epsilon", ["e"], [Decimal("0.1")], "Tolerance.")
    registry.define_value_param("label", ["text"], ["none"], "Label.")
    registry.define_choice_param("mode", "speed", "fast", [("fast", "F."), ("slow", "S.")], "Mode.")
    return registry


class ParseTest(TestCase):
    """Behavioral tests for successful parses."""

    def setUp(self):
        self.registry = build_registry()
        self.parser = ArgumentParser(self.registry, quiet=True)

    def testCleanCommandLine(self):
        faults = self.parser.parse(["prog", "--count", "5", "--loud", "--size", "800", "600"])
        self.assertEqual(faults, ())
        self.assertTrue(self.registry.is_defined("loud"))
        self.assertTrue(self.registry.is_defined("count"))
        self.assertFalse(self.registry.is_defined("mode"))
        self.assertEqual(self.registry.numeric_value("count"), 5)
        self.assertEqual(self.registry.numeric_value("size", 1), 800)
        self.assertEqual(self.registry.numeric_value("size", 2), 600)

    def testProgramNameIsSkipped(self):
        self.assertEqual(self.parser.parse(["--loud"]), ())
        self.assertFalse(self.registry.is_defined("loud"))
        self.assertEqual(self.parser.parse([]), ())

    def testEveryKindConverts(self):
        self.parser.parse([
            "prog",
            "--ratio", "1e-3",
            "--epsilon", "0.1000000000000000000001",
            "--label", "hello world",
            "--mode", "slow",
        ])
        self.assertEqual(self.parser.faults, ())
        self.assertEqual(self.registry.numeric_value("ratio"), 0.001)
        self.assertEqual(self.registry.numeric_value("epsilon"), Decimal("0.1000000000000000000001"))
        self.assertEqual(self.registry.text_value("label"), "hello world")
        self.assertEqual(self.registry.choice_value("mode"), "slow")

    def testChoiceAcceptsUnlistedText(self):
        self.assertEqual(self.parser.parse(["prog", "--mode", "turbo"]), ())
        self.assertEqual(self.registry.choice_value("mode"), "turbo")

    def testValuesAreConsumedVerbatim(self):
        self.assertEqual(self.parser.parse(["prog", "--label", "--count"]), ())
        self.assertEqual(self.registry.text_value("label"), "--count")
        self.assertFalse(self.registry.is_defined("count"))

    def testLastOccurrenceWins(self):
        self.parser.parse(["prog", "--count", "2", "--count", "3"])
        self.assertEqual(self.registry.numeric_value("count"), 3)

    def testChoiceKeepsDefaultWhenAbsent(self):
        self.assertEqual(self.parser.parse(["prog", "--loud"]), ())
        self.assertEqual(self.registry.choice_value("mode"), "fast")
        self.assertFalse(self.registry.is_defined("mode"))

    def testFlagConsumesNoValue(self):
        faults = self.parser.parse(["prog", "--loud", "5"])
        self.assertEqual(len(faults), 1)
        self.assertEqual(faults[0].token, "5")
        self.assertTrue(self.registry.is_defined("loud"))

    def testNamesAreNotNormalizedOnTheCommandLine(self):
        faults = self.parser.parse(["prog", "loud"])
        self.assertEqual(len(faults), 1)
        self.assertIsInstance(faults[0], UnknownParameterFault)
        self.assertFalse(self.registry.is_defined("loud"))


class FaultsTest(TestCase):
    """Behavioral tests for soft failures and their diagnostics."""

    def setUp(self):
        self.registry = build_registry()
        self.parser = ArgumentParser(self.registry, quiet=True)

    def testUnknownTokenIsSkipped(self):
        faults = self.parser.parse(["prog", "--bogus", "--count", "2"])
        self.assertEqual(len(faults), 1)
        fault, = faults
        self.assertIsInstance(fault, UnknownParameterFault)
        self.assertIsInstance(fault, Warning)
        self.assertEqual(fault.code, FaultCode.UNKNOWN_PARAMETER)
        self.assertEqual(str(fault), 'unknown parameter "--bogus"')
        self.assertEqual(fault.token, "--bogus")
        self.assertEqual(fault.index, 1)
        self.assertEqual(fault.position, "first")
        self.assertEqual(self.registry.numeric_value("count"), 2)

    def testUnknownTokenSuggestion(self):
        fault, = self.parser.parse(["prog", "--cuont", "2"])[:1]
        self.assertEqual(fault.suggestions, ("--count",))
        self.assertEqual(fault.hint, "did you mean '--count'?")

    def testUnknownTokenWithoutSuggestion(self):
        fault, = self.parser.parse(["prog", "zzzzzzzz"])
        self.assertEqual(fault.suggestions, ())
        self.assertIsNone(fault.hint)

    def testMissingValue(self):
        fault, = self.parser.parse(["prog", "--count"])
        self.assertIsInstance(fault, NotEnoughValuesFault)
        self.assertEqual(str(fault), 'error: parameter "--count" expects 1 value')
        self.assertEqual(fault.token, "--count")
        self.assertEqual(fault.index, 1)
        self.assertEqual(fault.slot, 1)
        self.assertEqual(fault.expected, 1)
        self.assertTrue(self.registry.is_defined("count"))
        self.assertEqual(self.registry.numeric_value("count"), 1)

    def testMissingSecondValueReportedOnce(self):
        faults = self.parser.parse(["prog", "--size", "3"])
        self.assertEqual(len(faults), 1)
        self.assertEqual(str(faults[0]), 'error: parameter "--size" expects 2 values')
        self.assertEqual(faults[0].slot, 2)
        self.assertEqual(self.registry.numeric_value("size", 1), 3)
        self.assertEqual(self.registry.numeric_value("size", 2), 480)
        self.assertTrue(self.registry.is_defined("size"))

    def testUncastableValueKeepsPrevious(self):
        faults = self.parser.parse(["prog", "--count", "5", "--count", "abc"])
        fault, = faults
        self.assertIsInstance(fault, UncastableValueFault)
        self.assertEqual(str(fault), 'parameter "--count" expects an integer value, received "abc"')
        self.assertEqual(fault.token, "abc")
        self.assertEqual(fault.index, 4)
        self.assertIs(fault.kind, ValueKind.INTEGER)
        self.assertTrue(self.registry.is_defined("count"))
        self.assertFalse(self.registry.is_valid("count"))
        self.assertEqual(self.registry.numeric_value("count"), 5)

    def testValidityRecoversOnNextParse(self):
        self.parser.parse(["prog", "--count", "abc"])
        self.assertFalse(self.registry.is_valid("count"))
        self.assertEqual(self.parser.parse(["prog", "--count", "7"]), ())
        self.assertTrue(self.registry.is_valid("count"))

    def testIntegerConversionIsStrict(self):
        for token in ("12abc", "1.5", ""):
            with self.subTest(token=token):
                fault, = self.parser.parse(["prog", "--count", token])
                self.assertIsInstance(fault, UncastableValueFault)

    def testRealAndExtendedWording(self):
        faults = self.parser.parse(["prog", "--ratio", "x", "--epsilon", "y"])
        self.assertEqual([str(fault) for fault in faults], [
            'parameter "--ratio" expects a real value, received "x"',
            'parameter "--epsilon" expects an extended-precision real value, received "y"',
        ])

    def testFaultsAreInTokenOrder(self):
        faults = self.parser.parse(["prog", "--nope", "--count", "x", "--size"])
        self.assertEqual(
            [type(fault) for fault in faults],
            [UnknownParameterFault, UncastableValueFault, NotEnoughValuesFault],
        )

    def testUnknownOptionRaisesAttributeError(self):
        fault, = self.parser.parse(["prog", "--nope"])
        with self.assertRaises(AttributeError):
            fault.slot

    def testFrenchDiagnostics(self):
        parser = ArgumentParser(self.registry, locale=Locale.FR, quiet=True)
        faults = parser.parse(["prog", "--bogus", "--count", "x", "--size"])
        self.assertEqual([str(fault) for fault in faults], [
            'erreur : paramètre "--bogus" inconnu',
            'le paramètre "--count" attend une valeur entière, et a reçu "x"',
            'erreur : le paramètre "--size" attend 2 valeurs',
        ])


class ReportingTest(TestCase):
    """Behavioral tests for diagnostics printed on a console."""

    def setUp(self):
        self.stream = io.StringIO()
        self.console = Console(file=self.stream, width=200, color_system=None)
        self.registry = build_registry()

    def testFaultsArePrintedAsTheyOccur(self):
        parser = ArgumentParser(self.registry, console=self.console)
        parser.parse(["prog", "--cuont", "--count"])
        self.assertEqual(self.stream.getvalue(), (
            'unknown parameter "--cuont"\n'
            " → did you mean '--count'?\n"
            'error: parameter "--count" expects 1 value\n'
        ))

    def testQuietParserPrintsNothing(self):
        parser = ArgumentParser(self.registry, console=self.console, quiet=True)
        self.assertEqual(len(parser.parse(["prog", "--bogus"])), 1)
        self.assertEqual(self.stream.getvalue(), "")


if __name__ == "__main__":
    unittest.main()
