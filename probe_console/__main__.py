from probe_console.cli.main import app

app(prog_name="probe-console")
