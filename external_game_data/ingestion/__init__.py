"""
Ingestion layer — data-source clients that fill the holder model.

Submodules:
  hypixel_client — Hypixel public API (achievement catalog, player achievements)

Credential placement (.env, gitignored):
  HYPIXEL_API_KEY — Hypixel developer API key (player endpoints only)
"""
