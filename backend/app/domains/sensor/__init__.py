"""
感測器領域模組

感測器隸屬於設備（多對一），響應中會帶出所屬設備名稱。
"""
