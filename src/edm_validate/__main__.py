from edm_validate.cli import app

app(prog_name="edm-validate-examples")
