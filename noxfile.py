import nox

nox.options.reuse_existing_virtualenvs = True

SRC = ["async_linq", "tests", "noxfile.py"]


def format_with_args(session: nox.Session, *args):
    session.run("autoflake", *args)
    session.run("isort", *args)
    session.run("black", *args)


@nox.session
def lint(session: nox.Session):
    """Runs linters"""
    try:
        session.run("poetry", "install", "--all-extras", external=True)
        session.run("pyright", *SRC)
        session.run("flake8", *SRC)
        format_with_args(session, *SRC, "--check")
    except Exception:
        session.error(
            "linting has failed. Run 'nox -s format' to fix formatting and fix other errors manually"
        )


@nox.session
def format(session: nox.Session):
    """Runs fixers"""
    session.run("poetry", "install", "--all-extras", external=True)
    format_with_args(session, *SRC)


@nox.session
def test(session: nox.Session):
    session.run("poetry", "install", "--all-extras", external=True)
    session.run("pytest", *(session.posargs or ["tests/unit_tests/"]))
