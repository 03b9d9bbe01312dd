"""TaskTracker 业务服务层"""
