from ecseagle.main import app

app(prog_name="ecseagle")
