from shopify_mcp.server.mcp_server import main

if __name__ == "__main__":
    main()
