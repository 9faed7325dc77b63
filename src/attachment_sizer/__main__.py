from attachment_sizer.cli import app

app(prog_name="attachment-sizer")
