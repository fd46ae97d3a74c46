import os

def get_settings_module() -> str:
    # Chọn module cấu hình theo biến APP_ENV, mặc định là 'development'
    env = os.getenv("APP_ENV", "development").lower()

    # 1. Production
    if env in {"prod", "production"}:
        return "config.production"
    
    # 2. Testing
    if env in {"test", "testing"}:
        return "config.testing"
    
    # 3. Mọi trường hợp còn lại dùng Development
    return "config.development"
