"""
GraphQL query construction for the repository search.

Owner, topic and cursor are interpolated literally into the search string.
Nothing is escaped, so values containing double quotes produce a broken query.
"""
from typing import Optional

# Nested advisory records requested per repository.
VULNERABILITY_ALERT_LIMIT = 100

DETAILS_FIELDS = """
        id
        name
        url
        createdAt
        description
        forkCount
        licenseInfo {
          type: spdxId
          name
        }
        codeOfConduct {
          name
          url
        }
        openIssues: issues(first: 100, filterBy: {states: OPEN}) {
          totalCount
        }
        openPRs: pullRequests(first: 100, states: OPEN) {
          totalCount
        }
        stargazerCount
        openGraphImageUrl
        usesCustomOpenGraphImage
        vulnerabilityAlerts(first: %(alert_limit)d) {
          totalCount
        }
        issueTemplates {
          about
          body
          name
          title
        }
        pullRequestTemplates {
          body
          filename
        }""" % {"alert_limit": VULNERABILITY_ALERT_LIMIT}

VULNERABILITIES_FIELDS = """
        id
        name
        url
        vulnerabilityAlerts(first: %(alert_limit)d) {
          totalCount
          nodes {
            securityVulnerability {
              advisory {
                cvss {
                  score
                }
                severity
                summary
                description
                cwes(first: 10) {
                  totalCount
                  nodes {
                    cweId
                    name
                    description
                  }
                }
              }
              severity
            }
          }
        }""" % {"alert_limit": VULNERABILITY_ALERT_LIMIT}

SEARCH_TEMPLATE = """
query {
  search(type: REPOSITORY, first: %(count)d, query: "%(scope)s") {
    repositoryCount
    repos: edges {
      cursor
      repo: node {
        ... on Repository {%(fields)s
        }
      }
    }
  }
}
"""


def build_search_scope(owner: str, topic: Optional[str] = None, cursor: Optional[str] = None) -> str:
    """Builds the ``user:<owner>[, topic:<topic>][, after:<cursor>]`` search string."""
    scope = f"user:{owner}"
    if topic:
        scope += f", topic:{topic}"
    if cursor:
        scope += f", after:{cursor}"
    return scope


def _build_query(fields: str, owner: str, count: int, topic: Optional[str], cursor: Optional[str]) -> str:
    return SEARCH_TEMPLATE % {
        "count": count,
        "scope": build_search_scope(owner, topic, cursor),
        "fields": fields,
    }


def build_details_query(owner: str, count: int = 10, topic: Optional[str] = None, cursor: Optional[str] = None) -> str:
    """
    Query for descriptive and structural repository attributes.

    Args:
        owner (str): User or organization login.
        count (int): Page size, sent as ``first``.
        topic (Optional[str]): Only match repositories with this topic.
        cursor (Optional[str]): Resume after this edge cursor.

    Returns:
        str: The GraphQL query document.
    """
    return _build_query(DETAILS_FIELDS, owner, count, topic, cursor)


def build_vulnerabilities_query(owner: str, count: int = 10, topic: Optional[str] = None, cursor: Optional[str] = None) -> str:
    """Query for the vulnerability alerts and advisories of each repository."""
    return _build_query(VULNERABILITIES_FIELDS, owner, count, topic, cursor)
