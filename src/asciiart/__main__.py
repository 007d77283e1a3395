from asciiart.cli import main

main()
