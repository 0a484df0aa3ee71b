import unittest

from os_list.domain.exceptions import InvalidInputException, UnknownFieldException
from os_list.domain.fields import DetailField, VulnerabilityField, normalize, parse_field_option, resolve


class TestNormalize(unittest.TestCase):
    def test_lowercases_and_strips_whitespace(self) -> None:
        self.assertEqual(normalize(" Star Count "), "starcount")
        self.assertEqual(normalize("Has\tPR Templates"), "hasprtemplates")


class TestCatalog(unittest.TestCase):
    def test_keys_are_unique(self) -> None:
        for catalog in (DetailField, VulnerabilityField):
            keys = [field.key for field in catalog]
            self.assertEqual(len(keys), len(set(keys)))

    def test_detail_catalog_order(self) -> None:
        self.assertEqual(DetailField.labels()[0], "Name")
        self.assertEqual(DetailField.labels()[-1], "Cursor ID")
        self.assertEqual(len(DetailField.labels()), 14)


class TestResolve(unittest.TestCase):
    def test_no_selection_returns_full_catalog(self) -> None:
        self.assertEqual(resolve(None), tuple(DetailField))
        self.assertEqual(resolve([]), tuple(DetailField))
        self.assertEqual(resolve(parse_field_option("")), tuple(DetailField))

    def test_keeps_caller_order(self) -> None:
        self.assertEqual(
            resolve(["URL", "name", "Star count"]),
            (DetailField.URL, DetailField.NAME, DetailField.STAR_COUNT),
        )

    def test_keeps_duplicates(self) -> None:
        self.assertEqual(resolve(["name", "Name "]), (DetailField.NAME, DetailField.NAME))

    def test_unknown_field_fails_with_allowed_list(self) -> None:
        with self.assertRaises(UnknownFieldException) as ctx:
            resolve(["name", "Stars", "bogus"])

        self.assertEqual(ctx.exception.field, "Stars")
        self.assertIn("'Stars'", str(ctx.exception))
        self.assertIn("Name, Description, License, URL", str(ctx.exception))
        self.assertIsInstance(ctx.exception, InvalidInputException)

    def test_parse_field_option_splits_on_commas(self) -> None:
        self.assertEqual(parse_field_option("Name,URL"), ("Name", "URL"))
        self.assertEqual(resolve(parse_field_option("Name, Open PRs")), (DetailField.NAME, DetailField.OPEN_PRS))
