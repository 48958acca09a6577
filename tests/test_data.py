SAMPLE_ENDORSEMENT_KEY = (
    "AToAAQALAAMAsgAgg3GXZ0SEs/gakMyNRqXXJP1S124GUgtk8qHaGzMUaaoABgCAAEMAEAgAAAAAAAEAxsj"
    "2gUScTk1UjuioeTlfGYZrrimExB+bScH75adUMRIi2UOMxG1kw4y+9RW/IVoMl4e620VxZad0ARX2gUqVjYO7KPVt3dyKhZS3dkcvfBisB"
    "hP1XH9B33VqHG9SHnbnQXdBUaCgKAfxome8UmBKfe+naTsE5fkvjb/do3/dD6l4sGBwFCnKRdln4XpM03zLpoHFao8zOwt8l/uP3qUIxmC"
    "Yv9A7m69Ms+5/pCkTu/rK4mRDsfhZ0QLfbzVI6zQFOKF/rwsfBtFeWlWtcuJMKlXdD8TXWElTzgh7JS4qhFzreL0c1mI0GCj+Aws0usZh7"
    "dLIVPnlgZcBhgy1SSDQMQ=="
)

SAMPLE_ID = "valid-id"

SAMPLE_CERTIFICATE_PEM = (
    "-----BEGIN CERTIFICATE-----\n"
    "MIIBiDCCAS2gAwIBAgIFWks8LR4wCgYIKoZIzj0EAwIwNjEUMBIGA1UEAwwLcmlv\n"
    "dGNvcmVuZXcxETAPBgNVBAoMCE1TUl9URVNUMQswCQYDVQQGEwJVUzAgFw0xNzAx\n"
    "MDEwMDAwMDBaGA8zNzAxMDEzMTIzNTk1OVowNjEUMBIGA1UEAwwLcmlvdGNvcmVu\n"
    "ZXcxETAPBgNVBAoMCE1TUl9URVNUMQswCQYDVQQGEwJVUzBZMBMGByqGSM49AgEG\n"
    "CCqGSM49AwEHA0IABLVS6bK+QMm+HZ0247Nm+JmnERuickBXTj6rydcP3WzVQNBN\n"
    "pvcQ/4YVrPp60oiYRxZbsPyBtHt2UCAC00vEXy+jJjAkMA4GA1UdDwEB/wQEAwIH\n"
    "gDASBgNVHRMBAf8ECDAGAQH/AgECMAoGCCqGSM49BAMCA0kAMEYCIQDEjs2PoZEi\n"
    "/yAQNj2Vji9RthQ33HG/QdL12b1ABU5UXgIhAPJujG/c/S+7vcREWI7bQcCb31JI\n"
    "BDhWZbt4eyCvXZtZ\n"
    "-----END CERTIFICATE-----\n"
)

SAMPLE_CERTIFICATE_INFO = {
    "subjectName": "CN=ROOT_00000000-0000-0000-0000-000000000000, OU=Azure IoT, O=MSFT, C=US",
    "sha1Thumbprint": "0000000000000000000000000000000000",
    "sha256Thumbprint": SAMPLE_ID,
    "issuerName": "CN=ROOT_00000000-0000-0000-0000-000000000000, OU=Azure IoT, O=MSFT, C=US",
    "notBeforeUtc": "2017-11-14T12:34:18Z",
    "notAfterUtc": "2017-11-20T12:34:18Z",
    "serialNumber": "000000000000000000",
    "version": 3,
}

SAMPLE_X509_PAYLOAD = {
    "signingCertificates": {
        "primary": {
            "info": SAMPLE_CERTIFICATE_INFO,
        }
    }
}

SAMPLE_TPM_PAYLOAD = {"endorsementKey": SAMPLE_ENDORSEMENT_KEY}

SAMPLE_X509_ATTESTATION_JSON = (
    """{
   "type":"x509",
   "x509":{
       "signingCertificates":{
           "primary":{
               "info": {
                   "subjectName": "CN=ROOT_00000000-0000-0000-0000-000000000000, OU=Azure IoT, O=MSFT, C=US",
                   "sha1Thumbprint": "0000000000000000000000000000000000",
                   "sha256Thumbprint": "%s",
                   "issuerName": "CN=ROOT_00000000-0000-0000-0000-000000000000, OU=Azure IoT, O=MSFT, C=US",
                   "notBeforeUtc": "2017-11-14T12:34:18Z",
                   "notAfterUtc": "2017-11-20T12:34:18Z",
                   "serialNumber": "000000000000000000",
                   "version": 3
               }
           }
       }
   }
}"""
    % SAMPLE_ID
)

SAMPLE_TPM_ATTESTATION_JSON = (
    """{
   "type":"tpm",
   "tpm":{
       "endorsementKey":"%s"
   }
}"""
    % SAMPLE_ENDORSEMENT_KEY
)
