from ipnav.cli import main

main(prog_name="ipnav")
