MOCK_JIRA_ISSUE_RESPONSE = {
    "expand": "renderedFields,names,schema,operations,editmeta,changelog,versionedRepresentations",
    "id": "12345",
    "self": "https://example.atlassian.net/rest/api/3/issue/12345",
    "key": "PROJ-123",
    "fields": {
        "summary": "Test Issue Summary",
        "description": None,
        "created": "2024-01-01T10:00:00.000+0000",
        "updated": "2024-01-02T15:30:00.000+0000",
        "status": {
            "self": "https://example.atlassian.net/rest/api/3/status/3",
            "name": "In Progress",
            "id": "3",
            "statusCategory": {
                "id": 4,
                "key": "indeterminate",
                "colorName": "yellow",
                "name": "In Progress",
            },
        },
        "issuetype": {
            "id": "10001",
            "name": "Task",
            "subtask": False,
        },
        "priority": {"name": "Medium", "id": "3"},
        "assignee": None,
        "labels": ["backend", "urgent"],
        "customfield_10010": "PROJ-1",
    },
}

MOCK_JIRA_SEARCH_RESPONSE = {
    "expand": "schema,names",
    "startAt": 0,
    "maxResults": 50,
    "total": 2,
    "issues": [
        {
            "id": "12345",
            "self": "https://example.atlassian.net/rest/api/3/issue/12345",
            "key": "PROJ-123",
            "fields": {
                "summary": "Test Issue Summary",
                "status": {"name": "In Progress"},
            },
        },
        {
            "id": "12346",
            "self": "https://example.atlassian.net/rest/api/3/issue/12346",
            "key": "PROJ-124",
            "fields": {
                "summary": "Another Issue",
                "status": {"name": "To Do"},
            },
        },
    ],
}

MOCK_JIRA_CREATED_ISSUE_RESPONSE = {
    "id": "10050",
    "key": "PROJ-456",
    "self": "https://example.atlassian.net/rest/api/3/issue/10050",
}

MOCK_JIRA_COMMENT_RESPONSE = {
    "id": "10000",
    "self": "https://example.atlassian.net/rest/api/3/issue/10010/comment/10000",
    "body": "Looks good to me",
    "created": "2024-01-03T09:00:00.000+0000",
}

MOCK_JIRA_NOT_FOUND_BODY = (
    '{"errorMessages":["Issue does not exist or you do not have permission to see it."],'
    '"errors":{}}'
)
