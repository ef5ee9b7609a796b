from solid_principles.cli import main

main()
