"""function modules behind fpy, each paired with the accessor Seq exposes for it"""
