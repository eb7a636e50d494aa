from setuptools import setup

# Metadata goes in setup.cfg. These are here for GitHub's dependency graph.
setup(
    name="basicgate",
    install_requires=["Werkzeug>=2.3"],
    extras_require={"tests": ["pytest"]},
)
