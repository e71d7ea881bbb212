"""Launch orchestration for the Frankfurt Sentinel bot.

Modules:
- config: LauncherSettings via pydantic-settings (SENTINEL_* variables)
- models: LaunchPlan, BotEnvironment and check report models
- core: build_plan, run_launcher, check_configuration
"""
