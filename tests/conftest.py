pytest_plugins = ["pytester", "draw_check.plugin"]
