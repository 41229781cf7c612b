from wordslide.main import app

app(prog_name="wordslide")
