"""GraphQL documents sent to the Fly API."""

from __future__ import annotations

from typing import Final

APP_FRAGMENT: Final[str] = """
fragment AppFragment on App {
  id
  name
  appUrl
  hostname
  sharedIpAddress
  organization {
    id
    slug
  }
}
"""

ORGANIZATIONS_QUERY: Final[str] = """
query OrganizationsQuery {
  organizations {
    nodes {
      id
      slug
      name
      type
    }
  }
}
"""

ORGANIZATION_QUERY: Final[str] = """
query OrganizationQuery($slug: String!) {
  organization(slug: $slug) {
    id
    slug
    name
    type
  }
}
"""

GET_APP_QUERY: Final[str] = (
    """
query GetAppQuery($name: String!) {
  app(name: $name) {
    ...AppFragment
  }
}
"""
    + APP_FRAGMENT
)

CREATE_APP_MUTATION: Final[str] = (
    """
mutation CreateAppMutation($name: String!, $organizationId: ID!) {
  createApp(input: {name: $name, organizationId: $organizationId}) {
    app {
      ...AppFragment
    }
  }
}
"""
    + APP_FRAGMENT
)

DELETE_APP_MUTATION: Final[str] = """
mutation DeleteAppMutation($appId: ID!) {
  deleteApp(appId: $appId) {
    organization {
      id
    }
  }
}
"""
