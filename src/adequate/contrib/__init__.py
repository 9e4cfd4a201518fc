"""
@Author: li
@Email: lijianqiao2906@live.com
@FileName: __init__.py
@DateTime: 2026-10-17
@Docs: Framework integrations (optional extras).
框架集成（可选依赖）。
"""
