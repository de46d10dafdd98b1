# obpslg/__init__.py
