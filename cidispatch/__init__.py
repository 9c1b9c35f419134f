"""cidispatch: trigger CI workflows from PR comment commands.

Commenting ``/ci api`` or ``/ci frontend`` on a pull request dispatches the
matching GitHub Actions workflow on the PR's head branch.

Structure:
    cidispatch/
    ├── __main__.py          # Entry point dispatcher
    ├── domain/              # Domain models (parse-once pattern)
    │   ├── ci_target.py     # CITarget, TargetWorkflowMap
    │   ├── parse_result.py  # ParseResult
    │   ├── dispatch.py      # DispatchContext, DispatchOutcome
    │   └── comment_event.py # CommentEvent
    ├── services/            # Business logic services
    │   ├── comment_parser.py
    │   ├── workflow_dispatcher.py
    │   └── github_comment.py
    ├── infrastructure/      # External system interactions
    │   ├── config.py
    │   └── github/          # runner.py, workflow_client.py, output.py
    └── commands/            # Thin command orchestrators
        ├── parse_comment.py
        ├── dispatch.py
        ├── handle_comment.py
        └── update_comment.py
"""
