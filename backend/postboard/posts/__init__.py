# backend/postboard/posts/__init__.py

"""
投稿（Post）の CRUD モジュール群。

- schemas: Post 内部モデルと /posts の入出力スキーマ
- store: ロックで保護されたインメモリストア
- service: CRUD と通知付き更新のユースケース
- state: 共有インスタンスの生成とテスト用リセット
- router: /posts エンドポイント
"""
