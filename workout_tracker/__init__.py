"""健身记录客户端：登录会话、个人资料、社交分享与云同步状态。"""
__version__ = "0.1.0"
