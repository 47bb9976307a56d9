# backend/postboard/notifications/__init__.py

"""
投稿更新通知用モジュール群。

構成:
- schemas: 操作種別・チャンネル種別・送信結果のスキーマ
- service: Notifier インターフェースと実装、ファンアウト用ディスパッチャ
- clients: Gmail / LINE Messaging API への HTTP クライアント
- config: 通知関連の環境変数読み出し
- factory: アプリ全体で共有する NotificationDispatcher の生成
"""
