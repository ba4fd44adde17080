from aria_access.server import main

main()
