"""GraphQL documents sent to GitHub. Each takes the username as ``$login``."""

CONTRIBUTIONS_QUERY = """
query($login: String!) {
  user(login: $login) {
    contributionsCollection {
      contributionCalendar {
        totalContributions
        weeks {
          contributionDays {
            date
            contributionCount
            color
          }
        }
      }
    }
  }
}
"""

PINNED_QUERY = """
query($login: String!) {
  user(login: $login) {
    pinnedItems(first: 6, types: REPOSITORY) {
      nodes {
        ... on Repository {
          name
          description
          url
          stargazerCount
          forkCount
          primaryLanguage {
            name
            color
          }
          updatedAt
        }
      }
    }
  }
}
"""

TOP_LANGUAGES_QUERY = """
query($login: String!) {
  user(login: $login) {
    repositories(first: 100, orderBy: {field: UPDATED_AT, direction: DESC}, isFork: false) {
      nodes {
        name
        languages(first: 10, orderBy: {field: SIZE, direction: DESC}) {
          edges {
            size
            node {
              name
              color
            }
          }
        }
      }
    }
  }
}
"""

DETAILED_ACTIVITY_QUERY = """
query($login: String!) {
  user(login: $login) {
    contributionsCollection {
      commitContributionsByRepository(maxRepositories: 10) {
        repository {
          name
          url
        }
        contributions {
          totalCount
        }
      }
      pullRequestContributionsByRepository(maxRepositories: 10) {
        repository {
          name
          url
        }
        contributions {
          totalCount
        }
      }
      issueContributionsByRepository(maxRepositories: 10) {
        repository {
          name
          url
        }
        contributions {
          totalCount
        }
      }
    }
  }
}
"""
