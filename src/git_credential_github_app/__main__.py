from git_credential_github_app.cli import app

app(prog_name="git-credential-github-app")
