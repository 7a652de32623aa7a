"""GraphQL documents sent to the cluster deploy and system APIs."""

from __future__ import annotations

from typing import Any

CLIENT_MUTATION_ID = "graphcool-cli"

MIGRATION_FRAGMENT = """
fragment MigrationFragment on Migration {
  revision
  steps {
    type
    __typename
    ... on CreateEnum {
      name
      ce_values: values
    }
    ... on CreateField {
      model
      name
      cf_typeName: typeName
      cf_isRequired: isRequired
      cf_isList: isList
      cf_isUnique: unique
      cf_relation: relation
      cf_defaultValue: default
      cf_enum: enum
    }
    ... on CreateModel {
      name
    }
    ... on CreateRelation {
      name
      leftModel
      rightModel
    }
    ... on DeleteEnum {
      name
    }
    ... on DeleteField {
      model
      name
    }
    ... on DeleteModel {
      name
    }
    ... on DeleteRelation {
      name
    }
    ... on UpdateEnum {
      name
      newName
      values
    }
    ... on UpdateField {
      model
      name
      newName
      typeName
      isRequired
      isList
      isUnique: unique
      relation
      default
      enum
    }
    ... on UpdateModel {
      name
      um_newName: newName
    }
  }
  hasBeenApplied
}
"""

ADD_PROJECT_MUTATION = """
mutation addProject($name: String!, $stage: String!, $secrets: [String!]) {
  addProject(input: {name: $name, stage: $stage, secrets: $secrets}) {
    project {
      name
    }
  }
}
"""

GET_DEPLOY_URL_MUTATION = """
mutation getUrl($projectId: String!) {
  getTemporaryDeployUrl(input: {projectId: $projectId}) {
    url
  }
}
"""

DEPLOY_MUTATION = (
    """
mutation deploy($name: String!, $stage: String!, $types: String!, $dryRun: Boolean, $secrets: [String!]) {
  deploy(input: {name: $name, stage: $stage, types: $types, dryRun: $dryRun, secrets: $secrets}) {
    errors {
      type
      field
      description
    }
    migration {
      ...MigrationFragment
    }
  }
}
"""
    + MIGRATION_FRAGMENT
)

LIST_PROJECTS_QUERY = """
{
  listProjects {
    name
    stage
  }
}
"""

PROJECT_QUERY = """
query project($name: String!, $stage: String!) {
  project(name: $name, stage: $stage) {
    name
    stage
  }
}
"""

SCHEMA_PROBE_QUERY = """
{
  __schema {
    directives {
      description
    }
  }
}
"""

MIGRATION_STATUS_QUERY = """
query migrationStatus($name: String!, $stage: String!) {
  migrationStatus(name: $name, stage: $stage) {
    revision
    hasBeenApplied
  }
}
"""

AUTHENTICATE_CUSTOMER_MUTATION = """
mutation authenticateCustomer($token: String!) {
  authenticateCustomer(input: {auth0IdToken: $token}) {
    token
    user {
      id
    }
  }
}
"""

PATS_QUERY = """
query pats($projectId: ID!) {
  viewer {
    project(id: $projectId) {
      permanentAuthTokens {
        edges {
          node {
            id
            name
            token
          }
        }
      }
    }
  }
}
"""

FUNCTIONS_QUERY = """
query functions($projectId: ID!) {
  viewer {
    project(id: $projectId) {
      functions {
        edges {
          node {
            name
            id
            type
            stats {
              requestCount
              errorCount
            }
            __typename
          }
        }
      }
    }
  }
}
"""

_LOG_FIELDS = """
id
requestId
duration
status
timestamp
message
"""

FUNCTION_LOGS_QUERY = (
    """
query functionLogs($id: ID!, $count: Int!) {
  node(id: $id) {
    ... on Function {
      logs(last: $count) {
        pageInfo {
          endCursor
        }
        edges {
          node {"""
    + _LOG_FIELDS
    + """          }
        }
      }
    }
  }
}
"""
)

ALL_FUNCTION_LOGS_QUERY = (
    """
query allFunctionLogs($id: ID!, $count: Int!) {
  viewer {
    project(id: $id) {
      functions {
        edges {
          node {
            logs(last: $count) {
              edges {
                node {"""
    + _LOG_FIELDS
    + """                }
              }
            }
          }
        }
      }
    }
  }
}
"""
)

PROJECT_NAME_QUERY = """
query projectName($projectId: ID!) {
  viewer {
    project(id: $projectId) {
      name
    }
  }
}
"""

EXPORT_DATA_MUTATION = f"""
mutation exportData($projectId: String!) {{
  exportData(input: {{projectId: $projectId, clientMutationId: "{CLIENT_MUTATION_ID}"}}) {{
    url
  }}
}}
"""

RESET_DATA_MUTATION = """
mutation {
  resetData
}
"""


def delete_projects_alias(index: int) -> str:
    return f"project{index}"


def build_delete_projects_mutation(project_ids: list[str]) -> tuple[str, dict[str, Any]]:
    """Build one mutation deleting every project in ``project_ids``.

    Each deletion is an aliased ``deleteProject`` field bound to its own
    numbered variable, so the whole batch is a single round trip.

    Returns:
        The mutation document and its variables.
    """
    arguments = ", ".join(f"$projectId{i}: String!" for i in range(len(project_ids)))
    fields = "\n".join(
        f"  {delete_projects_alias(i)}: deleteProject(input: "
        f'{{projectId: $projectId{i}, clientMutationId: "{CLIENT_MUTATION_ID}"}}) {{\n'
        "    deletedId\n"
        "  }"
        for i in range(len(project_ids))
    )
    mutation = f"mutation deleteProjects({arguments}) {{\n{fields}\n}}\n"
    variables = {f"projectId{i}": project_id for i, project_id in enumerate(project_ids)}
    return mutation, variables
