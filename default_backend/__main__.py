from default_backend.server import main

main()
