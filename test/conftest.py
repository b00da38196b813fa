from test.utils.fixtures import document_store, cognito_tokens, chalice_client  # noqa: F401
