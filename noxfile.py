import nox

PYTHON_VERSIONS = ["3.11", "3.12", "3.13", "3.14"]

# Packages with C extensions that must be rebuilt per Python version.
# Poetry's wheel cache can serve a .so compiled for the wrong interpreter.
_C_EXT_PACKAGES = ["psycopg2-binary"]


def _install(session: nox.Session) -> None:
    """Install the project with the test group into the nox virtualenv."""
    session.run("poetry", "install", "--with", "test", "--all-extras", external=True)
    session.run("pip", "install", "--force-reinstall", "--no-cache-dir", *_C_EXT_PACKAGES)


@nox.session(python=PYTHON_VERSIONS)
def tests(session: nox.Session) -> None:
    """Run the full OrderDesk suite across Python versions."""
    _install(session)
    session.run("pytest", *session.posargs)


@nox.session(python=PYTHON_VERSIONS)
def tests_domain(session: nox.Session) -> None:
    """Run the reconciliation and aggregate tests only (no HTTP, no database)."""
    _install(session)
    session.run("pytest", "tests/sales/domain/")


@nox.session(python=PYTHON_VERSIONS[-1])
def tests_production(session: nox.Session) -> None:
    """Run the suite against PostgreSQL (needs the database from domain.toml)."""
    _install(session)
    session.run("pytest", "--env", "production", *session.posargs)
