from slnadd.cli import app

app()
