from earthclassmail_mcp.server import main

main()
