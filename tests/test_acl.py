import unittest

from os_list.infrastructure.acl import GitHubTranslator


class TestGitHubTranslator(unittest.TestCase):
    def test_to_domain_parses_nested_counts_and_flags(self) -> None:
        raw_edge = {
            "cursor": "Y3Vyc29yOjE=",
            "repo": {
                "name": "eightshift-libs",
                "url": "https://github.com/infinum/eightshift-libs",
                "description": "Library for WordPress themes",
                "licenseInfo": {"type": "MIT", "name": "MIT License"},
                "stargazerCount": 123,
                "forkCount": 12,
                "openIssues": {"totalCount": 4},
                "openPRs": {"totalCount": 2},
                "codeOfConduct": {"name": "Contributor Covenant", "url": "https://example.com"},
                "usesCustomOpenGraphImage": True,
                "issueTemplates": [{"name": "Bug report"}],
                "pullRequestTemplates": [],
                "vulnerabilityAlerts": {"totalCount": 3},
            },
        }

        record = GitHubTranslator.to_domain(raw_edge)

        self.assertEqual(record.name, "eightshift-libs")
        self.assertEqual(record.license, "MIT")
        self.assertEqual(record.star_count, 123)
        self.assertEqual(record.open_issues, 4)
        self.assertEqual(record.open_prs, 2)
        self.assertTrue(record.has_code_of_conduct)
        self.assertTrue(record.has_custom_og_image)
        self.assertTrue(record.has_issue_templates)
        self.assertFalse(record.has_pr_templates)
        self.assertEqual(record.vulnerability_count, 3)
        self.assertEqual(record.cursor, "Y3Vyc29yOjE=")

    def test_missing_attributes_fall_back_to_defaults(self) -> None:
        record = GitHubTranslator.to_domain({"repo": {"name": "bare", "licenseInfo": None, "description": None}})

        self.assertEqual(record.name, "bare")
        self.assertEqual(record.description, "")
        self.assertEqual(record.license, "")
        self.assertEqual(record.url, "")
        self.assertEqual(record.star_count, 0)
        self.assertEqual(record.open_prs, 0)
        self.assertFalse(record.has_code_of_conduct)
        self.assertFalse(record.has_custom_og_image)
        self.assertEqual(record.vulnerability_count, 0)
        self.assertEqual(record.advisories, ())
        self.assertEqual(record.cursor, "")

    def test_code_of_conduct_with_empty_fields_still_counts(self) -> None:
        record = GitHubTranslator.to_domain({"repo": {"codeOfConduct": {"name": None, "url": None}}})
        self.assertTrue(record.has_code_of_conduct)

    def test_advisories_are_translated(self) -> None:
        raw_edge = {
            "repo": {
                "vulnerabilityAlerts": {
                    "totalCount": 2,
                    "nodes": [
                        {
                            "securityVulnerability": {
                                "severity": "CRITICAL",
                                "advisory": {"summary": "Prototype pollution", "description": "Long text"},
                            }
                        },
                        {"securityVulnerability": None},
                    ],
                }
            }
        }

        record = GitHubTranslator.to_domain(raw_edge)

        self.assertEqual(record.vulnerability_count, 2)
        self.assertEqual(record.advisories[0].severity, "CRITICAL")
        self.assertEqual(record.advisories[0].summary, "Prototype pollution")
        self.assertEqual(record.advisories[1].severity, "")
        self.assertEqual(record.advisories[1].description, "")

    def test_vulnerability_count_defaults_to_number_of_nodes(self) -> None:
        raw_edge = {"repo": {"vulnerabilityAlerts": {"nodes": [{"securityVulnerability": {"severity": "LOW"}}]}}}
        self.assertEqual(GitHubTranslator.to_domain(raw_edge).vulnerability_count, 1)
