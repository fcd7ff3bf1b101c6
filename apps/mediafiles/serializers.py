from urllib.parse import unquote_plus

from rest_framework import serializers


class S3BucketSerializer(serializers.Serializer):
    name = serializers.CharField()


class S3ObjectSerializer(serializers.Serializer):
    key = serializers.CharField()
    size = serializers.IntegerField(required=False)
    contentType = serializers.CharField(required=False, allow_blank=True)

    def validate_key(self, value):
        # Keys arrive URL-encoded in event notifications
        return unquote_plus(value)


class S3EntitySerializer(serializers.Serializer):
    bucket = S3BucketSerializer()
    object = S3ObjectSerializer()


class S3RecordSerializer(serializers.Serializer):
    eventName = serializers.CharField()
    s3 = S3EntitySerializer()


class ObjectFinalizedSerializer(serializers.Serializer):
    """S3 event notification body"""

    Records = S3RecordSerializer(many=True)

    def finalized_objects(self) -> list[dict]:
        """(bucket, key, content_type) of every object-created record"""
        objects = []
        for record in self.validated_data['Records']:
            if not record['eventName'].startswith('ObjectCreated'):
                continue
            s3 = record['s3']
            objects.append(
                {
                    'bucket': s3['bucket']['name'],
                    'key': s3['object']['key'],
                    'content_type': s3['object'].get('contentType') or None,
                }
            )
        return objects
